from __future__ import annotations
from typing import List, Optional
from datetime import datetime, timezone
from uuid import uuid4, UUID
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON


class User(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True)
    name: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # free text as entered, e.g. "['peanut'", " Shellfish "
    allergies: List[str] = Field(default_factory=list, sa_column=Column(JSON))


class UserLikedRecipe(SQLModel, table=True):
    user_id: UUID = Field(foreign_key="user.id", primary_key=True)
    recipe_id: UUID = Field(foreign_key="recipe.id", primary_key=True)
    liked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

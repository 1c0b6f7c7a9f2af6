from __future__ import annotations
from typing import Optional
from datetime import date, datetime, timezone
from uuid import uuid4, UUID
from enum import Enum
from sqlmodel import SQLModel, Field


class QuantityUnit(str, Enum):
    GRAM = "g"
    KILOGRAM = "kg"
    MILLILITER = "ml"
    LITER = "l"
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    CUPS = "cups"
    PIECES = "pcs"
    PINCH = "pinch"
    DASH = "dash"
    TO_TASTE = "to taste"


class PantryItem(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    ingredient_id: UUID = Field(foreign_key="ingredient.id", index=True)
    quantity: float = 1.0
    unit: QuantityUnit = QuantityUnit.PIECES
    expiry_date: Optional[date] = None
    is_favorite: bool = False
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

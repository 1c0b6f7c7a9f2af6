from __future__ import annotations
from typing import List, Optional, Sequence, Set
from uuid import UUID

from sqlalchemy.engine import Engine
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from models.ingredient import Ingredient
from models.pantry import PantryItem
from models.recipe import Recipe
from models.user import User, UserLikedRecipe
from services.catalog.stores import UserProfile
from utils.logger import setup_logger

logger = setup_logger(__name__)


class SqlCatalogStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def list_recipes(self, offset: int, batch_size: int) -> List[Recipe]:
        with Session(self.engine) as session:
            statement = (
                select(Recipe)
                .options(selectinload(Recipe.ingredients))
                .order_by(Recipe.created_at, Recipe.id)
                .offset(offset)
                .limit(batch_size)
            )
            return list(session.exec(statement).all())

    def find_ingredients_by_ids(self, ids: Sequence[UUID]) -> List[Ingredient]:
        if not ids:
            return []
        with Session(self.engine) as session:
            statement = select(Ingredient).where(Ingredient.id.in_(list(ids)))
            return list(session.exec(statement).all())

    def find_recipes_excluding(self, excluded_ids: Set[UUID], limit: int) -> List[Recipe]:
        with Session(self.engine) as session:
            statement = select(Recipe).options(selectinload(Recipe.ingredients))
            if excluded_ids:
                statement = statement.where(Recipe.id.not_in(list(excluded_ids)))
            statement = statement.order_by(
                Recipe.average_rating.desc(),
                Recipe.review_count.desc(),
                Recipe.id,
            ).limit(limit)
            return list(session.exec(statement).all())

    def find_recipes_by_ids(self, ids: Sequence[UUID]) -> List[Recipe]:
        if not ids:
            return []
        with Session(self.engine) as session:
            statement = (
                select(Recipe)
                .options(selectinload(Recipe.ingredients))
                .where(Recipe.id.in_(list(ids)))
            )
            return list(session.exec(statement).all())


class SqlUserStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def find_user_profile(self, user_id: UUID) -> Optional[UserProfile]:
        with Session(self.engine) as session:
            user = session.get(User, user_id)
            if not user:
                return None

            pantry_names = session.exec(
                select(Ingredient.name)
                .join(PantryItem, PantryItem.ingredient_id == Ingredient.id)
                .where(PantryItem.user_id == user_id)
            ).all()

            liked_ids = session.exec(
                select(UserLikedRecipe.recipe_id).where(UserLikedRecipe.user_id == user_id)
            ).all()

            profile = UserProfile(
                user_id=user.id,
                allergens=list(user.allergies or []),
                pantry_ingredient_names=list(pantry_names),
                liked_recipe_ids=set(liked_ids),
            )

        logger.debug(
            "Loaded user profile",
            extra={
                "user_id": str(user_id),
                "pantry_items": len(profile.pantry_ingredient_names),
                "liked_recipes": len(profile.liked_recipe_ids),
            }
        )
        return profile

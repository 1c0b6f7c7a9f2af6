from services.catalog.stores import (
    CatalogStore,
    UserStore,
    UserProfile,
    iter_recipe_batches,
    iter_all_recipes,
)
from services.catalog.sql_stores import SqlCatalogStore, SqlUserStore

__all__ = [
    "CatalogStore",
    "UserStore",
    "UserProfile",
    "iter_recipe_batches",
    "iter_all_recipes",
    "SqlCatalogStore",
    "SqlUserStore",
]

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Callable
from config import settings, create_db_and_tables, engine as db_engine
from config.config_loader import load_tuning
from routes.api import router as api_router
from routes.health import router as health_router
from routes.admin_index import router as admin_index_router
from middleware.request_logging import RequestLoggingMiddleware
from services.catalog.sql_stores import SqlCatalogStore, SqlUserStore
from services.core.engine import RecommendationEngine
from services.features.embedding_store import IngredientEmbeddingStore
from utils.logger import setup_logger

logger = setup_logger(__name__)


def build_engine() -> RecommendationEngine:
    create_db_and_tables()
    logger.info("Database tables synchronized")

    tuning = load_tuning(settings.RECOMMENDATION_CONFIG_PATH)
    return RecommendationEngine(
        catalog=SqlCatalogStore(db_engine),
        users=SqlUserStore(db_engine),
        embeddings=IngredientEmbeddingStore(settings.INGREDIENT_EMBEDDINGS_PATH),
        tuning=tuning,
    )


def create_app(engine_factory: Callable[[], RecommendationEngine] = build_engine) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting application lifespan")

        # embeddings and the lexical index must exist before the first request
        recommendation_engine = engine_factory()
        recommendation_engine.start()
        app.state.engine = recommendation_engine

        yield

        logger.info("Application shutdown complete")

    app = FastAPI(title="Recipe Recommender API", version="0.1.0", debug=settings.DEBUG, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(health_router)
    app.include_router(admin_index_router)

    @app.get("/")
    def root():
        return {"app": "Recipe Recommender", "status": "running"}

    return app


app = create_app()

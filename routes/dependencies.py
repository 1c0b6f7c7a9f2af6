from fastapi import HTTPException, Request

from services.core.engine import RecommendationEngine


def get_engine(request: Request) -> RecommendationEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None or not engine.is_ready:
        raise HTTPException(503, "recommendation engine is not ready")
    return engine

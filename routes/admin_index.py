from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from datetime import datetime, timezone
import time

from routes.dependencies import get_engine
from services.core.engine import RecommendationEngine
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/admin/index", tags=["admin"])


class IndexRebuildResponse(BaseModel):
    success: bool
    message: str
    recipes_indexed: int
    vocabulary_size: int
    build_duration_seconds: float
    timestamp: str


@router.post("/rebuild", response_model=IndexRebuildResponse)
def rebuild_index(engine: RecommendationEngine = Depends(get_engine)):
    logger.info("Index rebuild requested")
    start = time.time()

    try:
        corpus = engine.rebuild_corpus()
    except Exception as e:
        logger.error(
            "Index rebuild failed",
            extra={"error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Index rebuild failed: {e}")

    return IndexRebuildResponse(
        success=True,
        message=f"Index rebuilt successfully with {len(corpus)} recipes",
        recipes_indexed=len(corpus),
        vocabulary_size=corpus.index.vocabulary_size,
        build_duration_seconds=round(time.time() - start, 3),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

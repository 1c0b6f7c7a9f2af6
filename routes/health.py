from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from typing import Dict, Any
from datetime import datetime, timezone

from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
def health_check():
    return {
        "status": "healthy",
        "timestamp": _now(),
        "service": "recipe-recommender"
    }


@router.get("/ready")
def readiness_check(request: Request):
    engine = getattr(request.app.state, "engine", None)
    checks: Dict[str, Any] = {}

    if engine is None:
        checks["engine"] = {"status": "not_ready", "reason": "not_configured"}
        ready = False
    else:
        status = engine.status()
        ready = status["ready"]
        checks["engine"] = {"status": "ready" if ready else "not_ready"}
        checks["embeddings"] = {
            "count": status["embedding_count"],
            "dimension": status["embedding_dimension"],
        }
        checks["lexical_index"] = {
            "indexed_recipes": status["indexed_recipes"],
            "vocabulary_size": status["vocabulary_size"],
        }

    body = {"ready": ready, "checks": checks, "timestamp": _now()}
    if not ready:
        logger.warning("Readiness check failed", extra={"checks": checks})
        return JSONResponse(status_code=503, content=body)
    return body

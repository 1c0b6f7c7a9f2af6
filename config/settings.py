import os
from typing import List
from dotenv import load_dotenv
from pathlib import Path

# Load .env from project folder explicitly (works even if CWD differs)
_BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=_BASE_DIR / ".env")


class Settings:
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./recipes.db")

    # Precomputed ingredient embeddings (JSON object: ingredient_key -> [floats])
    INGREDIENT_EMBEDDINGS_PATH: str = os.getenv(
        "INGREDIENT_EMBEDDINGS_PATH",
        str(_BASE_DIR / "data" / "ingredient_embeddings.json"),
    )

    # Recommendation tuning file
    RECOMMENDATION_CONFIG_PATH: str = os.getenv(
        "RECOMMENDATION_CONFIG_PATH",
        str(_BASE_DIR / "config" / "config.yaml"),
    )

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8010"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # CORS
    ALLOWED_ORIGINS: List[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()

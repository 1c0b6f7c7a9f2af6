#!/usr/bin/env python
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config_loader import ConfigLoader, ConfigValidator, RecommendationTuning
from config.settings import settings
from services.features.embedding_store import IngredientEmbeddingStore
from utils.logger import setup_logger

logger = setup_logger(__name__)


def validate_configuration():
    print("\n" + "="*80)
    print(" Recipe Recommender Configuration Validator")
    print("="*80 + "\n")

    try:
        print(f"[INFO] Loading configuration from {settings.RECOMMENDATION_CONFIG_PATH}...")
        config = ConfigLoader(Path(settings.RECOMMENDATION_CONFIG_PATH)).load()

        print("[INFO] Running validation checks...")
        errors = ConfigValidator.validate(config)

        if errors:
            print(f"\n[ERROR] Configuration validation failed with {len(errors)} error(s):\n")
            for error in errors:
                print(f"  - {error}")
            print()
            return False

        tuning = RecommendationTuning.from_config(config)

        print(f"[INFO] Loading ingredient embeddings from {settings.INGREDIENT_EMBEDDINGS_PATH}...")
        embeddings = IngredientEmbeddingStore(settings.INGREDIENT_EMBEDDINGS_PATH)
        embeddings.initialize()

        print("[INFO] All validation checks passed\n")

        print("Configuration Summary:")
        print("-" * 80)
        print(f"  Database:          {settings.DATABASE_URL}")
        print(f"  Default limit:     {tuning.default_limit}")
        print(f"  Overfetch factor:  {tuning.overfetch_factor}")
        print(f"  Collaborative:     base={tuning.collaborative.base_score} step={tuning.collaborative.step} floor={tuning.collaborative.min_score}")
        print(f"  Index batch size:  {tuning.lexical_batch_size}")
        print(f"  Embeddings:        {embeddings.size} x {embeddings.dimension}")
        print(f"  Log Level:         {settings.LOG_LEVEL}")
        print("-" * 80 + "\n")

        return True

    except Exception as e:
        print(f"\n[ERROR] Failed to validate configuration: {str(e)}\n")
        logger.error("Configuration validation failed", exc_info=True)
        return False


if __name__ == "__main__":
    success = validate_configuration()
    sys.exit(0 if success else 1)

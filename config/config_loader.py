import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, List

import yaml
from pydantic import BaseModel, Field

from utils.logger import setup_logger

logger = setup_logger(__name__)


class ConfigurationError(Exception):
    pass


class CollaborativeTuning(BaseModel):
    base_score: float = 0.8
    step: float = 0.1
    min_score: float = 0.0


class RecommendationTuning(BaseModel):
    default_limit: int = 10
    overfetch_factor: int = 2
    collaborative: CollaborativeTuning = Field(default_factory=CollaborativeTuning)
    lexical_batch_size: int = 100

    @staticmethod
    def from_config(config: Dict[str, Any]) -> "RecommendationTuning":
        rec = config.get("recommendation", {}) or {}
        lexical = config.get("lexical_index", {}) or {}
        data: Dict[str, Any] = {
            key: rec[key] for key in ("default_limit", "overfetch_factor") if key in rec
        }
        if "collaborative" in rec:
            data["collaborative"] = rec["collaborative"]
        if "batch_size" in lexical:
            data["lexical_batch_size"] = lexical["batch_size"]
        return RecommendationTuning(**data)


class ConfigLoader:
    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            base_dir = Path(__file__).resolve().parent
            config_path = base_dir / "config.yaml"

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None
        self._last_loaded: Optional[float] = None

    def load(self, force_reload: bool = False) -> Dict[str, Any]:
        if not self.config_path.exists():
            raise ConfigurationError(f"config file not found: {self.config_path}")

        current_mtime = self.config_path.stat().st_mtime

        if not force_reload and self._config is not None and self._last_loaded == current_mtime:
            return self._config

        logger.info(
            "Loading configuration from file",
            extra={"config_path": str(self.config_path)}
        )

        try:
            with open(self.config_path, "r") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"config file is not valid YAML: {e}") from e

        if raw_config is None:
            raise ConfigurationError("config file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("config file must contain a mapping at the top level")

        self._config = self._interpolate_env_vars(raw_config)
        self._last_loaded = current_mtime

        logger.info("Configuration loaded successfully")

        return self._config

    def _interpolate_env_vars(self, config: Any) -> Any:
        if isinstance(config, dict):
            return {
                key: self._interpolate_env_vars(value)
                for key, value in config.items()
            }
        elif isinstance(config, list):
            return [self._interpolate_env_vars(item) for item in config]
        elif isinstance(config, str):
            return self._replace_env_vars_in_string(config)
        else:
            return config

    def _replace_env_vars_in_string(self, value: str) -> Any:
        pattern = re.compile(r'\$\{([^}]+)\}')

        def replacer(match):
            env_var = match.group(1)
            env_value = os.getenv(env_var)

            if env_value is None:
                logger.warning(
                    f"Environment variable not found: {env_var}",
                    extra={"env_var": env_var}
                )
                return match.group(0)

            return env_value

        replaced = pattern.sub(replacer, value)
        if replaced != value:
            # an interpolated scalar should keep its YAML type ("20" -> 20)
            return yaml.safe_load(replaced) if replaced.strip() else replaced
        return replaced


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    @staticmethod
    def validate_recommendation_config(config: Dict[str, Any]) -> List[str]:
        errors = []

        rec = config.get('recommendation', {}) or {}

        default_limit = rec.get('default_limit', 10)
        if not isinstance(default_limit, int) or isinstance(default_limit, bool) or default_limit < 1:
            errors.append(f"invalid default_limit: {default_limit}")

        overfetch = rec.get('overfetch_factor', 2)
        if not isinstance(overfetch, int) or isinstance(overfetch, bool) or overfetch < 1:
            errors.append(f"invalid overfetch_factor: {overfetch} (must be an integer >= 1)")

        return errors

    @staticmethod
    def validate_collaborative_config(config: Dict[str, Any]) -> List[str]:
        errors = []

        collab = (config.get('recommendation', {}) or {}).get('collaborative', {}) or {}

        base_score = collab.get('base_score', 0.8)
        if not _is_number(base_score) or base_score <= 0 or base_score > 1:
            errors.append(f"invalid collaborative base_score: {base_score} (must be in (0, 1])")

        step = collab.get('step', 0.1)
        if not _is_number(step) or step <= 0:
            errors.append(f"invalid collaborative step: {step} (must be > 0)")

        min_score = collab.get('min_score', 0.0)
        if not _is_number(min_score) or min_score < 0:
            errors.append(f"invalid collaborative min_score: {min_score}")
        elif _is_number(base_score) and min_score >= base_score:
            errors.append("collaborative min_score must be lower than base_score")

        return errors

    @staticmethod
    def validate_lexical_index_config(config: Dict[str, Any]) -> List[str]:
        errors = []

        lexical = config.get('lexical_index', {}) or {}

        batch_size = lexical.get('batch_size', 100)
        if not isinstance(batch_size, int) or isinstance(batch_size, bool) or batch_size < 1:
            errors.append(f"invalid lexical_index batch_size: {batch_size}")

        return errors

    @staticmethod
    def validate(config: Dict[str, Any]) -> List[str]:
        all_errors = []

        all_errors.extend(ConfigValidator.validate_recommendation_config(config))
        all_errors.extend(ConfigValidator.validate_collaborative_config(config))
        all_errors.extend(ConfigValidator.validate_lexical_index_config(config))

        return all_errors


def load_tuning(config_path: Optional[Path] = None) -> RecommendationTuning:
    loader = ConfigLoader(config_path=config_path)
    config = loader.load()

    validation_errors = ConfigValidator.validate(config)
    if validation_errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in validation_errors)
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    logger.info("Configuration validated successfully")

    return RecommendationTuning.from_config(config)

"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from bandhub.models.config import MatchingConfig, RecommendationConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Directory holding organizations.json, videos.json, watch_history.json.
    # None keeps everything in memory.
    data_dir: Optional[Path] = None

    # Related-video cache: Redis when set, in-process otherwise
    redis_url: Optional[str] = None

    # Optional JSON with "matching", "scores", "events", "exclusions",
    # "similarity", "diversity", "sections", "cache" sections
    algorithm_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_dir=_path_env("BANDHUB_DATA_DIR"),
            redis_url=os.getenv("REDIS_URL") or None,
            algorithm_config_path=_path_env("ALGORITHM_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        if self.data_dir is not None and not self.data_dir.is_dir():
            errors.append(f"Data directory not found: {self.data_dir}")
        if self.algorithm_config_path is not None and not self.algorithm_config_path.is_file():
            errors.append(f"Algorithm config not found: {self.algorithm_config_path}")
        return len(errors) == 0, errors

    def load_algorithm_config(self) -> Dict:
        """Raw algorithm config dict ({} when no file is configured)."""
        if self.algorithm_config_path is None:
            return {}
        with open(self.algorithm_config_path) as f:
            return json.load(f)

    def matching_config(self) -> MatchingConfig:
        return MatchingConfig.from_dict(self.load_algorithm_config())

    def recommendation_config(self) -> RecommendationConfig:
        return RecommendationConfig.from_dict(self.load_algorithm_config())


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()

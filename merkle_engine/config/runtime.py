"""
Runtime Configuration

Central configuration for tree construction, digest selection, benchmarking
and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from merkle_engine.crypto.hashing import DEFAULT_HASH_ALGORITHM, get_hash_function, HashFunction
from merkle_engine.merkle.factory import TreeVariant
from merkle_engine.schemas.errors import ConfigError, UnsupportedHashAlgorithmError

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MERKLE_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    variant: str = TreeVariant.LAYERED.value

    def __post_init__(self):
        try:
            self.variant = TreeVariant(self.variant).value
        except ValueError as e:
            raise ConfigError(
                f"Unknown tree variant: {self.variant!r}",
                details={"choices": [v.value for v in TreeVariant]},
            ) from e
        try:
            self.hash_algorithm = get_hash_function(self.hash_algorithm).name
        except UnsupportedHashAlgorithmError as e:
            raise ConfigError(e.message, details=e.details) from e

    def hash_function(self) -> HashFunction:
        return get_hash_function(self.hash_algorithm)


@dataclass
class BenchConfig:
    """Configuration for the synthetic benchmark."""
    count: int = 2 ** 16
    seed: Optional[int] = None

    def __post_init__(self):
        if self.count < 1:
            raise ConfigError(f"Benchmark item count must be positive, got {self.count}")


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the Merkle engine.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    bench: BenchConfig = field(default_factory=BenchConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {self.log_level!r}",
                details={"choices": list(_LOG_LEVELS)},
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - MERKLE_HASH_ALGORITHM: Digest name (sha256, sha3_256, blake2b, ...)
        - MERKLE_TREE_VARIANT: layered or linked
        - MERKLE_LOG_LEVEL: Log level
        - MERKLE_LOG_FILE: Optional log file path
        - MERKLE_BENCH_COUNT: Number of synthetic items for benchmarks
        - MERKLE_BENCH_SEED: Seed for synthetic item generation
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("tree", {})["hash_algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}TREE_VARIANT"):
            overrides.setdefault("tree", {})["variant"] = os.getenv(f"{ENV_PREFIX}TREE_VARIANT")

        if os.getenv(f"{ENV_PREFIX}BENCH_COUNT"):
            overrides.setdefault("bench", {})["count"] = _env_int(f"{ENV_PREFIX}BENCH_COUNT")
        if os.getenv(f"{ENV_PREFIX}BENCH_SEED"):
            overrides.setdefault("bench", {})["seed"] = _env_int(f"{ENV_PREFIX}BENCH_SEED")

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree") or {}
        bench_data = data.get("bench") or {}

        try:
            tree = TreeConfig(**tree_data)
            bench = BenchConfig(**bench_data)
            return cls(
                tree=tree,
                bench=bench,
                log_level=data.get("log_level") or "INFO",
                log_file=data.get("log_file"),
                extra=data.get("extra") or {},
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        merged = self.to_dict()
        for section in ("tree", "bench"):
            if section in overrides:
                merged[section].update(overrides[section])
        for key in ("log_level", "log_file"):
            if key in overrides:
                merged[key] = overrides[key]
        merged["extra"] = copy.deepcopy(self.extra)

        return self.from_dict(merged)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "hash_algorithm": self.tree.hash_algorithm,
                "variant": self.tree.variant,
            },
            "bench": {
                "count": self.bench.count,
                "seed": self.bench.seed,
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
            "extra": self.extra,
        }


def _env_int(name: str) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env defaults)."""
    global _default_config
    _default_config = config

"""
Module 04 - CLI Configuration

Locates and loads the runtime configuration for the merkle CLI.
An explicit --config path wins; otherwise the first existing default
location is used. Environment variables (MERKLE_* prefix) override file
settings.
"""

from __future__ import annotations

from pathlib import Path

from merkle_engine.config import RuntimeConfig


def default_config_paths() -> list[Path]:
    """Config locations searched when --config is not given, in order."""
    return [
        Path.cwd() / "merkle.yaml",
        Path.cwd() / ".merkle.yaml",
        Path.home() / ".config" / "merkle" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ConfigError: If the file holds invalid values
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """# merkle CLI configuration
tree:
  hash_algorithm: sha256   # any fixed-size hashlib digest: sha256, sha512, sha3_256, blake2b, ...
  variant: layered         # layered or linked

bench:
  count: 65536
  seed: null

log_level: INFO
log_file: null
"""

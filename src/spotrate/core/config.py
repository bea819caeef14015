"""Configuration loading utilities."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class ServiceConfig:
    """Process configuration for the rates service."""

    host: str
    port: int
    seed_rate_file: Path
    log_level: str = DEFAULT_LOG_LEVEL


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Could not find project root (no pyproject.toml found)")


def get_default_seed_file() -> Path:
    """Get the seed rates file shipped in ``config/seed_rates.json``."""
    return get_project_root() / "config" / "seed_rates.json"


def load_service_config() -> ServiceConfig:
    """Load service configuration from environment.

    Environment variables:
        HOST: Interface to bind (default ``0.0.0.0``)
        PORT: Port to listen on (default ``9000``)
        SEED_RATE_FILE: JSON file used to seed the rate table
            (default ``config/seed_rates.json`` under the project root)
        LOG_LEVEL: Root log level (default ``INFO``)

    Returns:
        ServiceConfig with values resolved

    Raises:
        ValueError: If PORT is not an integer
    """
    load_dotenv()

    raw_port = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

    seed_file = os.getenv("SEED_RATE_FILE")
    seed_path = Path(seed_file) if seed_file else get_default_seed_file()

    return ServiceConfig(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=port,
        seed_rate_file=seed_path,
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )

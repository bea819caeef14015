"""Core utilities for the rates service."""

from spotrate.core.config import ServiceConfig, get_project_root, load_service_config

__all__ = [
    "ServiceConfig",
    "get_project_root",
    "load_service_config",
]

"""Users API package wiring and entrypoints."""

from usuarios_api.main import run_dev, run_prod
from usuarios_api.settings import BackendSettings, get_settings, settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
    "settings",
]

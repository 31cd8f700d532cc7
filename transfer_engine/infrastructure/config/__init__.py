"""
Infrastructure layer configuration.

This package contains:
- Settings loaded from the environment
- Dependency wiring of ports, resolver and use cases
"""

from transfer_engine.infrastructure.config.settings import (
    CurrencyDefinition,
    Settings,
    get_settings,
)

__all__ = [
    "CurrencyDefinition",
    "Settings",
    "get_settings",
]

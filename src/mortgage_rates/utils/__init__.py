"""Utility functions for configuration loading."""

from .config import (
    DEFAULT_RATES_FILE,
    ProductRateInput,
    RateUpdateConfig,
    get_rates_file,
    load_environment,
)

__all__ = [
    "DEFAULT_RATES_FILE",
    "ProductRateInput",
    "RateUpdateConfig",
    "get_rates_file",
    "load_environment",
]

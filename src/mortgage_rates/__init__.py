"""Mortgage Rates - merge daily mortgage rates into a JSON snapshot."""

__version__ = "0.1.0"

# Custom exceptions
from .exceptions import (
    MortgageRatesException,
    RateInputException,
    SnapshotReadException,
    SnapshotWriteException,
)

# Snapshot models
from .models import RateProduct, Snapshot, Trend

# Product catalog
from .products import PRODUCT_CATALOG, ProductDefinition

# Update operations
from .updater import (
    build_product,
    compute_rate_change,
    determine_trend,
    format_summary,
    read_snapshot,
    run_update,
    update_snapshot,
    write_snapshot,
)

# Configuration utilities
from .utils import ProductRateInput, RateUpdateConfig, load_environment

__all__ = [
    "__version__",
    "RateProduct",
    "Snapshot",
    "Trend",
    "PRODUCT_CATALOG",
    "ProductDefinition",
    "build_product",
    "compute_rate_change",
    "determine_trend",
    "format_summary",
    "read_snapshot",
    "run_update",
    "update_snapshot",
    "write_snapshot",
    "ProductRateInput",
    "RateUpdateConfig",
    "load_environment",
    # Exceptions
    "MortgageRatesException",
    "RateInputException",
    "SnapshotReadException",
    "SnapshotWriteException",
]

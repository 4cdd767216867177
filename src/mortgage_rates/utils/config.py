"""Configuration utilities for environment-based setup."""

import math
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from mortgage_rates.exceptions import RateInputException
from mortgage_rates.products import PRODUCT_CATALOG, PRODUCT_KEYS

DEFAULT_RATES_FILE = "rates.json"


def load_environment(env_file: str | Path | None = None) -> None:
    """Load environment variables from .env file if it exists.

    Variables already present in the process environment take precedence.

    Args:
        env_file: Explicit path to a .env file (if None, searches for '.env')
    """
    load_dotenv(dotenv_path=env_file)


class ProductRateInput(BaseModel):
    """New rate values supplied for one product.

    Attributes:
        current_rate: Current interest rate in percent
        current_apr: Current APR in percent
        previous_rate: Rate from the previous update (None when not supplied)
    """

    current_rate: float = Field(allow_inf_nan=False, description="Current rate")
    current_apr: float = Field(allow_inf_nan=False, description="Current APR")
    previous_rate: float | None = Field(
        default=None, allow_inf_nan=False, description="Previous rate, if known"
    )

    @property
    def effective_previous_rate(self) -> float:
        """Previous rate, treating a missing value as equal to the current rate."""
        if self.previous_rate is None:
            return self.current_rate
        return self.previous_rate


class RateUpdateConfig(BaseModel):
    """Explicit set of rate inputs for one update run.

    Attributes:
        products: Mapping of product key (e.g., '30yr') to its rate input
    """

    products: dict[str, ProductRateInput] = Field(
        description="Rate inputs keyed by product key"
    )

    @field_validator("products")  # type: ignore[misc]
    @classmethod
    def validate_product_keys(
        cls, v: dict[str, ProductRateInput]
    ) -> dict[str, ProductRateInput]:
        """Ensure exactly the catalog products are supplied."""
        missing = [key for key in PRODUCT_KEYS if key not in v]
        unknown = sorted(key for key in v if key not in PRODUCT_KEYS)
        if missing:
            raise ValueError(f"Missing rate inputs for: {', '.join(missing)}")
        if unknown:
            raise ValueError(f"Unknown products: {', '.join(unknown)}")
        return v

    def for_product(self, key: str) -> ProductRateInput:
        """Return the rate input for a product key."""
        return self.products[key]

    @classmethod
    def from_environment(
        cls, environ: Mapping[str, str] | None = None
    ) -> "RateUpdateConfig":
        """Build the configuration from environment variables.

        For each product suffix ``K`` (30YR, 15YR, FHA, CASHOUT, NOPOINT) reads
        ``RATE_K`` and ``APR_K`` (required) and ``PREV_RATE_K`` (optional).

        Args:
            environ: Mapping to read from (if None, loads .env and uses os.environ)

        Returns:
            Configured RateUpdateConfig

        Raises:
            RateInputException: If a required value is missing or any value
                is not a number
        """
        if environ is None:
            load_environment()
            environ = os.environ

        products: dict[str, ProductRateInput] = {}
        for product in PRODUCT_CATALOG:
            suffix = product.env_suffix
            products[product.key] = ProductRateInput(
                current_rate=_require_number(environ, f"RATE_{suffix}"),
                current_apr=_require_number(environ, f"APR_{suffix}"),
                previous_rate=_optional_number(environ, f"PREV_RATE_{suffix}"),
            )
        return cls(products=products)


def _require_number(environ: Mapping[str, str], key: str) -> float:
    value = _optional_number(environ, key)
    if value is None:
        raise RateInputException(
            f"Required rate input {key} is not set.", config_key=key
        )
    return value


def _optional_number(environ: Mapping[str, str], key: str) -> float | None:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return None

    try:
        value = float(raw.strip())
    except ValueError as e:
        raise RateInputException(
            f"{key} must be a number, got {raw!r}.", config_key=key, config_value=raw
        ) from e

    if not math.isfinite(value):
        raise RateInputException(
            f"{key} must be a finite number, got {raw!r}.",
            config_key=key,
            config_value=raw,
        )
    return value


def get_rates_file(environ: Mapping[str, str] | None = None) -> Path:
    """Get the snapshot file path.

    Reads ``RATES_FILE`` and falls back to 'rates.json' in the current directory.

    Returns:
        Path to the snapshot file
    """
    if environ is None:
        load_environment()
        environ = os.environ
    return Path(environ.get("RATES_FILE") or DEFAULT_RATES_FILE)

"""Snapshot data models for tracked mortgage rate products."""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Trend = Literal["up", "down", "stable"]

DEFAULT_UPDATE_FREQUENCY = "Updated daily by 9 AM ET"


def _drop_unset_fields(model: BaseModel, data: dict[str, Any]) -> dict[str, Any]:
    """Drop declared fields that are None; unknown keys are kept even when null."""
    declared = {
        field.alias or name for name, field in type(model).model_fields.items()
    }
    return {
        key: value
        for key, value in data.items()
        if not (value is None and key in declared)
    }


class RateProduct(BaseModel):
    """One mortgage product as shown on the rates page.

    Identity fields (label, tag, tag_class, sub, term, featured) describe the
    product and are never changed by an update. Rate fields are replaced on
    every update and the derived fields are recomputed from them.

    Unknown keys read from a snapshot are kept and written back unchanged.

    Attributes:
        label: Display name (e.g., '30-Yr Fixed')
        tag: Short category annotation (e.g., 'Conventional')
        tag_class: CSS classes used to render the tag
        sub: Short descriptor shown under the label
        rate: Display rate, e.g. '6.625%'
        apr: Display APR, e.g. '6.71% APR'
        featured: Whether the product is highlighted
        rate_value: Current numeric rate
        term: Loan duration in years
        prev_rate_value: Previous numeric rate
        rate_change: rate_value - prev_rate_value rounded to 3 decimals
        trend: Direction of the rate change
        avg30day: 30-day average rate, carried over between updates
        market_avg: Market average rate, carried over between updates

    Example:
        ```python
        product = RateProduct.model_validate(
            {"label": "30-Yr Fixed", "rateValue": 6.625, "trend": "down"}
        )
        print(product.rate_value)
        ```
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    label: str | None = Field(default=None, description="Display name")
    tag: str | None = Field(default=None, description="Short category annotation")
    tag_class: str | None = Field(
        default=None, alias="tagClass", description="CSS classes for the tag"
    )
    sub: str | None = Field(default=None, description="Short descriptor")
    rate: str | None = Field(default=None, description="Display rate")
    apr: str | None = Field(default=None, description="Display APR")
    featured: bool | None = Field(
        default=None, description="Whether the product is highlighted"
    )
    rate_value: float | None = Field(
        default=None, alias="rateValue", description="Current numeric rate"
    )
    term: int | None = Field(default=None, ge=0, description="Loan term in years")
    prev_rate_value: float | None = Field(
        default=None, alias="prevRateValue", description="Previous numeric rate"
    )
    rate_change: float | None = Field(
        default=None, alias="rateChange", description="Signed change since previous"
    )
    trend: Trend | None = Field(default=None, description="Direction of change")
    avg30day: float | None = Field(default=None, description="30-day average rate")
    market_avg: float | None = Field(
        default=None, alias="marketAvg", description="Market average rate"
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as snapshot (camelCase) fields, omitting unset ones."""
        return _drop_unset_fields(self, self.model_dump(by_alias=True))


class Snapshot(BaseModel):
    """The persisted record of all tracked rate products.

    Attributes:
        last_updated: Human-readable date of the last update (e.g., 'Oct 19, 2026')
        last_updated_time: ISO 8601 timestamp of the last update
        update_frequency: Free text describing how often rates are refreshed
        purchase: Purchase products in display order
        refi: Refinance products in display order
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    last_updated: str | None = Field(
        default=None, alias="lastUpdated", description="Human-readable update date"
    )
    last_updated_time: str | None = Field(
        default=None, alias="lastUpdatedTime", description="ISO 8601 update time"
    )
    update_frequency: str | None = Field(
        default=None, alias="updateFrequency", description="Refresh schedule text"
    )
    purchase: list[RateProduct] = Field(
        default_factory=list, description="Purchase products in display order"
    )
    refi: list[RateProduct] = Field(
        default_factory=list, description="Refinance products in display order"
    )

    def section(self, name: str) -> list[RateProduct]:
        """Return the product list for a section name ('purchase' or 'refi')."""
        if name == "purchase":
            return self.purchase
        if name == "refi":
            return self.refi
        raise KeyError(name)

    def to_json(self) -> str:
        """Serialize to the on-disk JSON layout (camelCase keys, 2-space indent)."""
        data = _drop_unset_fields(self, self.model_dump(by_alias=True))
        data["purchase"] = [product.to_dict() for product in self.purchase]
        data["refi"] = [product.to_dict() for product in self.refi]
        return json.dumps(data, indent=2, ensure_ascii=False)

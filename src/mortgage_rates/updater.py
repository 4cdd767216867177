"""Merge new mortgage rates into the persisted snapshot.

The updater reads the previous snapshot, overlays the supplied rates on
each tracked product, recomputes rate change and trend, and writes the
snapshot back in one atomic replace.
"""

import json
import logging
import os
import stat
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from mortgage_rates.exceptions import SnapshotReadException, SnapshotWriteException
from mortgage_rates.models import (
    DEFAULT_UPDATE_FREQUENCY,
    RateProduct,
    Snapshot,
    Trend,
)
from mortgage_rates.products import SECTIONS, ProductDefinition, products_in_section
from mortgage_rates.utils.config import ProductRateInput, RateUpdateConfig

logger = logging.getLogger(__name__)

SECTION_TITLES = {"purchase": "Purchase Rates", "refi": "Refinance Rates"}


def compute_rate_change(current: float, previous: float | None) -> float:
    """Return current - previous rounded to 3 decimals.

    A missing previous rate counts as equal to the current rate.
    """
    if previous is None:
        return 0.0
    # round() can yield -0.0; normalise so it serializes as 0.0
    return round(current - previous, 3) or 0.0


def determine_trend(rate_change: float) -> Trend:
    """Classify a rate change as 'up', 'down' or 'stable'."""
    if rate_change > 0:
        return "up"
    if rate_change < 0:
        return "down"
    return "stable"


def format_number(value: float) -> str:
    """Render a number the way it is interpolated into display strings.

    Whole numbers drop the trailing '.0' (7.0 -> '7').
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_rate(value: float) -> str:
    return f"{format_number(value)}%"


def format_apr(value: float) -> str:
    return f"{format_number(value)}% APR"


def build_product(
    previous_entry: RateProduct | None,
    definition: ProductDefinition,
    rate_input: ProductRateInput,
) -> RateProduct:
    """Build the updated entry for one product.

    Identity fields come from the previous entry, falling back to the
    catalog definition. Rate fields are replaced, derived fields are
    recomputed, and avg30day/marketAvg are carried over when present.

    Args:
        previous_entry: The product's entry in the previous snapshot, if any
        definition: Catalog definition of the product
        rate_input: New rate values for the product

    Returns:
        The updated RateProduct
    """
    fields = definition.identity()
    if previous_entry is not None:
        fields.update(previous_entry.to_dict())

    current = rate_input.current_rate
    rate_change = compute_rate_change(current, rate_input.previous_rate)

    avg30day = current
    market_avg = current
    if previous_entry is not None:
        if previous_entry.avg30day is not None:
            avg30day = previous_entry.avg30day
        if previous_entry.market_avg is not None:
            market_avg = previous_entry.market_avg

    fields.update(
        {
            "rate": format_rate(current),
            "apr": format_apr(rate_input.current_apr),
            "rateValue": current,
            "prevRateValue": rate_input.effective_previous_rate,
            "rateChange": rate_change,
            "trend": determine_trend(rate_change),
            "avg30day": avg30day,
            "marketAvg": market_avg,
        }
    )
    return RateProduct.model_validate(fields)


def update_snapshot(
    previous: Snapshot,
    config: RateUpdateConfig,
    now: datetime | None = None,
) -> Snapshot:
    """Apply new rates to a snapshot and stamp the update time.

    Product order in each section is preserved. Entries beyond the tracked
    products are kept unchanged.

    Args:
        previous: Snapshot read from disk
        config: New rate inputs for every tracked product
        now: Update time (default: current UTC time)

    Returns:
        A new Snapshot; ``previous`` is not modified
    """
    if now is None:
        now = datetime.now(UTC)

    sections: dict[str, list[RateProduct]] = {}
    for section in SECTIONS:
        prior = previous.section(section)
        products: list[RateProduct] = []
        for definition in products_in_section(section):
            previous_entry = (
                prior[definition.index] if definition.index < len(prior) else None
            )
            products.append(
                build_product(
                    previous_entry, definition, config.for_product(definition.key)
                )
            )
        products.extend(prior[len(products) :])
        sections[section] = products

    return previous.model_copy(
        update={
            "last_updated": format_date(now),
            "last_updated_time": format_timestamp(now),
            "update_frequency": previous.update_frequency or DEFAULT_UPDATE_FREQUENCY,
            "purchase": sections["purchase"],
            "refi": sections["refi"],
        }
    )


def format_date(moment: datetime) -> str:
    """Short display date, e.g. 'Oct 19, 2026'."""
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 UTC timestamp with milliseconds, e.g. '2026-10-19T13:05:00.000Z'."""
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def read_snapshot(path: Path) -> Snapshot:
    """Load and validate a snapshot file.

    Raises:
        SnapshotReadException: If the file is missing, unreadable, not JSON,
            or does not match the snapshot schema
    """
    logger.debug("Reading snapshot from %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotReadException(
            f"Cannot read snapshot {path}: {e}", path=path, original_error=e
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotReadException(
            f"Snapshot {path} is not valid JSON or not valid UTF-8: {e}",
            path=path,
            original_error=e,
        ) from e

    try:
        return Snapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotReadException(
            f"Snapshot {path} has an unexpected structure: {e}",
            path=path,
            original_error=e,
        ) from e


def write_snapshot(snapshot: Snapshot, path: Path) -> None:
    """Write a snapshot by atomically replacing the target file.

    The JSON is written to a temporary file in the same directory and then
    renamed over ``path``. The temporary file is removed if anything fails.

    Raises:
        SnapshotWriteException: If the file cannot be written
    """
    try:
        payload = snapshot.to_json().encode("utf-8")
    except UnicodeEncodeError as e:
        raise SnapshotWriteException(
            f"Snapshot for {path} cannot be encoded as UTF-8: {e}",
            path=path,
            original_error=e,
        ) from e

    tmp_path: Path | None = None
    replaced = False
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_path, path)
        replaced = True
    except OSError as e:
        raise SnapshotWriteException(
            f"Cannot write snapshot {path}: {e}", path=path, original_error=e
        ) from e
    finally:
        if tmp_path is not None and not replaced:
            tmp_path.unlink(missing_ok=True)
    logger.debug("Wrote %d bytes to %s", len(payload), path)


def run_update(
    path: Path, config: RateUpdateConfig, now: datetime | None = None
) -> Snapshot:
    """Read the snapshot at ``path``, apply ``config`` and write it back.

    Returns:
        The snapshot that was written
    """
    previous = read_snapshot(path)
    snapshot = update_snapshot(previous, config, now=now)
    write_snapshot(snapshot, path)
    logger.info("Updated %s (%s)", path, snapshot.last_updated)
    return snapshot


def format_summary(snapshot: Snapshot) -> list[str]:
    """Operator-facing summary lines for an updated snapshot."""
    lines = [
        "✅ Rates updated successfully!",
        f"📊 Updated Rates ({snapshot.last_updated}):",
    ]
    for section in SECTIONS:
        lines.append("")
        lines.append(f"{SECTION_TITLES[section]}:")
        for product in snapshot.section(section):
            lines.append(f"  {_summary_line(product)}")
    return lines


def _summary_line(product: RateProduct) -> str:
    change = product.rate_change or 0.0
    sign = "+" if change > 0 else ""
    return (
        f"{product.label}: {product.rate} "
        f"(Change: {sign}{format_number(change)}, Trend: {product.trend})"
    )

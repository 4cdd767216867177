"""Shared pytest configuration and fixtures for the test suite."""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from mortgage_rates.models import Snapshot
from mortgage_rates.utils.config import RateUpdateConfig

# 30yr falls, 15yr and cash-out rise, FHA unchanged, no-point has no previous rate
SAMPLE_ENVIRON: dict[str, str] = {
    "RATE_30YR": "6.625",
    "APR_30YR": "6.71",
    "PREV_RATE_30YR": "6.750",
    "RATE_15YR": "5.875",
    "APR_15YR": "5.99",
    "PREV_RATE_15YR": "5.75",
    "RATE_FHA": "6.25",
    "APR_FHA": "6.94",
    "PREV_RATE_FHA": "6.25",
    "RATE_CASHOUT": "7.125",
    "APR_CASHOUT": "7.24",
    "PREV_RATE_CASHOUT": "7.0",
    "RATE_NOPOINT": "6.990",
    "APR_NOPOINT": "7.01",
    "PREV_RATE_NOPOINT": "",
}

UPDATE_TIME = datetime(2026, 10, 19, 13, 5, 0, tzinfo=UTC)


def _product(
    label: str,
    tag: str,
    tag_class: str,
    sub: str,
    rate: float,
    avg30day: float,
    market_avg: float,
    term: int = 30,
) -> dict[str, Any]:
    return {
        "label": label,
        "tag": tag,
        "tagClass": tag_class,
        "sub": sub,
        "rate": f"{rate}%",
        "apr": f"{rate}% APR",
        "rateValue": rate,
        "term": term,
        "prevRateValue": rate,
        "rateChange": 0,
        "trend": "stable",
        "avg30day": avg30day,
        "marketAvg": market_avg,
    }


def make_snapshot_data() -> dict[str, Any]:
    """Build a previous snapshot as it would be stored on disk."""
    no_point = _product(
        "No-Point Refi",
        "No Lender Fees",
        "bg-white text-green-700 border border-green-100",
        "We pay title & lender fees",
        6.99,
        7.02,
        7.15,
    )
    no_point["featured"] = True
    return {
        "lastUpdated": "Oct 18, 2026",
        "lastUpdatedTime": "2026-10-18T13:02:11.000Z",
        "updateFrequency": "Updated daily by 9 AM ET",
        "purchase": [
            _product(
                "30-Yr Fixed",
                "Conventional",
                "bg-blue-100 text-blue-700",
                "0 Points",
                6.75,
                6.81,
                6.92,
            ),
            _product(
                "15-Yr Fixed",
                "Aggressive",
                "bg-purple-100 text-purple-700",
                "Pay off faster",
                5.75,
                5.93,
                6.05,
                term=15,
            ),
            _product(
                "30-Yr FHA",
                "Govt.",
                "bg-green-100 text-green-700",
                "Low Down Pmt",
                6.25,
                6.3,
                6.41,
            ),
        ],
        "refi": [
            _product(
                "Cash-Out",
                "Consolidate",
                "bg-orange-100 text-orange-700",
                "Max 80% LTV",
                7.0,
                7.18,
                7.3,
            ),
            no_point,
        ],
    }


@pytest.fixture
def sample_environ() -> dict[str, str]:
    """Environment variables for a full update run."""
    return dict(SAMPLE_ENVIRON)


@pytest.fixture
def update_time() -> datetime:
    """Fixed update time (UTC)."""
    return UPDATE_TIME


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    """Previous snapshot as raw JSON data."""
    return make_snapshot_data()


@pytest.fixture
def previous_snapshot(snapshot_data: dict[str, Any]) -> Snapshot:
    """Previous snapshot as a validated model."""
    return Snapshot.model_validate(snapshot_data)


@pytest.fixture
def rate_config() -> RateUpdateConfig:
    """Rate inputs parsed from the sample environment."""
    return RateUpdateConfig.from_environment(SAMPLE_ENVIRON)


@pytest.fixture
def rates_file(tmp_path: Path, snapshot_data: dict[str, Any]) -> Path:
    """Previous snapshot written to a temporary rates.json."""
    path = tmp_path / "rates.json"
    path.write_text(json.dumps(snapshot_data, indent=2), encoding="utf-8")
    return path


# Pytest configuration
pytest_plugins: list[str] = []

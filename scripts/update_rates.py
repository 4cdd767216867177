"""Update the published mortgage rates snapshot.

This script merges the rates passed in the RATE_*, APR_* and PREV_RATE_*
environment variables into `rates.json` at the project root and stamps the
update time. It is intended to be run by CI on a daily schedule.

Usage:
    RATE_30YR=6.625 APR_30YR=6.71 PREV_RATE_30YR=6.75 ... \
        python scripts/update_rates.py
"""

import sys
from pathlib import Path

from mortgage_rates.cli import main

RATE_FILE = Path(__file__).parent.parent / "rates.json"


if __name__ == "__main__":
    sys.exit(main(["--rates-file", str(RATE_FILE), *sys.argv[1:]]))

"""
Snapshot Runner — Loads the Record Store and prints the Sales Snapshot.

Usage:
    python -m sales_engine.snapshot_runner [DATA_DIR] [--as-of YYYY-MM-DD]
    (run from the project root)
"""

import argparse
import json
import sys
from datetime import date

from sales_engine.analyzer import SalesAnalyzer
from sales_engine.config import DATA_DIR
from sales_engine.records import RecordStore, RecordStoreError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the sales dashboard snapshot as JSON.")
    parser.add_argument("data_dir", nargs="?", default=DATA_DIR)
    parser.add_argument("--as-of", type=date.fromisoformat, default=None,
                        help="Reference date for risk checks (default: today)")
    args = parser.parse_args(argv)

    print("=" * 60)
    print("  Sales Analyzer — Snapshot Run")
    print("=" * 60)

    # --- Step 1: Load the record store ---
    print(f"\n[1/2] Loading records from:\n      {args.data_dir}")
    try:
        store = RecordStore.from_directory(args.data_dir)
    except RecordStoreError as exc:
        print(f"  [FAIL] {exc}")
        return 1

    for name, count in store.counts().items():
        print(f"        - {name:12s} {count:>5d} rows")

    # --- Step 2: Run the analyzer ---
    print(f"\n[2/2] Sales Snapshot (JSON):\n")
    snapshot = SalesAnalyzer(store).analyze(today=args.as_of)
    print(json.dumps(snapshot, indent=2))

    print("\n" + "=" * 60)
    print("  DONE.")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())

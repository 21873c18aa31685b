#!/usr/bin/env python3
"""Initialize the products table and optionally seed it from a YAML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from productstore.db.database import Database
from productstore.errors import StoreError
from productstore.seed import seed_products


def main():
    parser = argparse.ArgumentParser(description="Initialize the products table")
    parser.add_argument("--seed-products", type=str, help="YAML file with product definitions")
    parser.add_argument("--database-url", type=str, help="Override PRODUCTSTORE_DATABASE_URL")
    parser.add_argument("--timeout", type=float, help="Per-connection timeout in seconds")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        with Database(args.database_url, timeout=args.timeout) as db:
            db.init()
            print(f"Database initialized: {db!r}")
            if args.seed_products:
                products = seed_products(db, Path(args.seed_products))
                for p in products:
                    print(f"  Created product: {p.name} ({p.id})")
    except (StoreError, ValueError) as e:
        print(f"Failed: {e}", file=sys.stderr)
        sys.exit(1)

    print("Done.")


if __name__ == "__main__":
    main()

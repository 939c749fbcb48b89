#!/usr/bin/env python3
"""
Purchase Definition Check

Loads purchase definitions the same way the plugin does and reports what
made it into the catalog. Run it before restarting a server to catch broken
YAML files.

Usage:
    python scripts/check-purchases.py --data-folder plugins/PlexPurchases
    python scripts/check-purchases.py --layout game_config --data-folder plugins/PlexPurchases
    python scripts/check-purchases.py --export /tmp/purchases-export
"""

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from plexpurchases.config import PurchasesLayout, Settings
from plexpurchases.observability import get_logger, setup_logging
from plexpurchases.services.purchase_holder import PurchaseConfigHolder


def main():
    parser = argparse.ArgumentParser(
        description="Check PlexPurchases purchase definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the default assets layout
  python scripts/check-purchases.py --data-folder plugins/PlexPurchases

  # Check the shared game-config layout and show every load step
  python scripts/check-purchases.py --layout game_config -v
        """,
    )
    parser.add_argument(
        "--data-folder",
        type=Path,
        default=Path("plugins/PlexPurchases"),
        help="Plugin data folder (default: plugins/PlexPurchases)",
    )
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in PurchasesLayout],
        default=PurchasesLayout.ASSETS.value,
        help="Where purchase files live relative to the data folder",
    )
    parser.add_argument("--export", type=Path, help="Write loaded purchases to this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    settings = Settings(
        data_folder=args.data_folder,
        purchases_layout=PurchasesLayout(args.layout),
        log_level="DEBUG" if args.verbose else "INFO",
    )
    setup_logging(settings)
    logger = get_logger("check-purchases")

    holder = PurchaseConfigHolder(settings, logger=logger)
    holder.load_purchases()

    for purchase in holder.get_configured_purchases():
        limited = " [limited by times]" if purchase.is_limited_by_times else ""
        print(f"{purchase.product_id:<30} {purchase.price:>8}  {purchase.product_name}{limited}")

    print(f"\n{holder.get_configured_purchase_count()} purchase(s) loaded")

    if args.export:
        written = holder.export_purchases(args.export)
        print(f"{written} purchase(s) exported to {args.export}")

    sys.exit(0 if holder.get_configured_purchase_count() > 0 else 1)


if __name__ == "__main__":
    main()

"""
main.py
-------
Entry point for the repository inventory CLI.

Usage:
    python main.py <inventory.yaml>

Loads the inventory and prints a one-line summary with the repo count
per tier. Exits with status 1 when no path is given or loading fails.
"""

import os
import sys

from services.inventory_service import InventoryService
from utils.errors import InventoryError


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    argv = sys.argv if argv is None else argv

    if len(argv) < 2:
        program = os.path.basename(argv[0]) if argv else "repo-inventory"
        print(f"Usage: {program} <inventory.yaml>", file=sys.stderr)
        return 1

    service = InventoryService()
    try:
        inventory = service.load(argv[1])
    except InventoryError as e:
        print(f"❌ Failed to load inventory: {e}", file=sys.stderr)
        return 1

    print(service.format_summary(inventory))
    return 0


if __name__ == "__main__":
    sys.exit(main())

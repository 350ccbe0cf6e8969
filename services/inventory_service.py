"""
services/inventory_service.py
-----------------------------
Business logic on top of a loaded inventory: tier counts and the
one-line summary printed by the CLI.
"""

from pathlib import Path

from models.inventory import Inventory, Tier
from repositories.inventory_repo import InventoryRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class InventoryService:
    """Loads inventories and summarizes them per tier."""

    def __init__(self, repo: InventoryRepository | None = None):
        self.inventory_repo = repo or InventoryRepository()

    def load(self, path: str | Path) -> Inventory:
        """Load an inventory file. Errors from the repository propagate unchanged."""
        return self.inventory_repo.load(path)

    @staticmethod
    def tier_counts(inventory: Inventory) -> dict[str, int]:
        """
        Count repos per known tier.

        Returns:
            Dict with `total` plus one key per Tier value. Repos with an
            unknown tier only show up in `total`.
        """
        counts = {"total": len(inventory.repos)}
        for tier in Tier:
            counts[tier.value] = len(inventory.repos_for_tier(tier))
        return counts

    def format_summary(self, inventory: Inventory) -> str:
        """Render the one-line load summary."""
        counts = self.tier_counts(inventory)
        return (
            f"✅ {counts['total']} repos loaded "
            f"({counts['active']} active, {counts['production']} production, "
            f"{counts['dormant']} dormant)"
        )

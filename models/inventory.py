"""
models/inventory.py
-------------------
Domain model for the repository inventory: tiers, repositories and the
organization-wide table with its lookup helpers.
"""

from dataclasses import dataclass, field
from enum import Enum


class Tier(str, Enum):
    """Automation tier of a repository."""
    ACTIVE = "active"
    PRODUCTION = "production"
    DORMANT = "dormant"

    def __str__(self) -> str:
        return self.value


@dataclass
class Repo:
    """
    Represents a single repository in the inventory.

    Attributes:
        name: Repository name, filled from its key in the `repos` mapping.
        tier: One of the Tier values, or whatever string the file holds.
        priority: Free-form priority label.
        pipelines: Names of the automation pipelines the repo opts into.
        description: Optional human-readable note.
    """
    name: str = ""
    tier: str = ""
    priority: str = ""
    pipelines: list[str] = field(default_factory=list)
    description: str = ""

    def __str__(self) -> str:
        pipelines = ", ".join(self.pipelines) if self.pipelines else "-"
        return f"{self.name} [{self.tier}] pipelines: {pipelines}"


@dataclass
class Inventory:
    """
    The complete repository inventory of an organization.

    Attributes:
        org: Owning organization.
        repos: Repositories keyed by name.
    """
    org: str = ""
    repos: dict[str, Repo] = field(default_factory=dict)

    def repos_for_pipeline(self, pipeline: str) -> list[Repo]:
        """Return all repos that have the given pipeline configured (exact match)."""
        return [repo for repo in self.repos.values() if pipeline in repo.pipelines]

    def repos_for_tier(self, tier: Tier | str) -> list[Repo]:
        """Return all repos that belong to the given tier (exact match)."""
        return [repo for repo in self.repos.values() if repo.tier == tier]

    def __len__(self) -> int:
        return len(self.repos)

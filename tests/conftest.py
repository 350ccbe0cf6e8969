"""Shared fixtures for the inventory tests."""

import textwrap

import pytest

from models.inventory import Inventory, Repo, Tier


@pytest.fixture
def write_inventory(tmp_path):
    """Factory fixture writing YAML content to a file in a temp directory."""

    def _write(content: str, name: str = "inventory.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def acme_yaml():
    return """
        org: acme
        repos:
          a:
            tier: active
            pipelines: [pr]
          b:
            tier: active
            pipelines: [pr, backlog]
          c:
            tier: dormant
            pipelines: []
    """


@pytest.fixture
def sample_inventory():
    """An in-memory inventory covering every tier."""
    return Inventory(
        org="misty-step",
        repos={
            "factory": Repo(name="factory", tier=Tier.ACTIVE, pipelines=["pr", "issue-to-pr"]),
            "cerberus": Repo(name="cerberus", tier=Tier.ACTIVE, pipelines=["pr", "backlog-groom"]),
            "production-repo": Repo(name="production-repo", tier=Tier.PRODUCTION, pipelines=["pr"]),
            "dormant-repo": Repo(name="dormant-repo", tier=Tier.DORMANT, pipelines=[]),
        },
    )

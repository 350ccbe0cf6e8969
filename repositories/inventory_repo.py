"""
repositories/inventory_repo.py
------------------------------
Data access layer for the inventory YAML file.
Reads the file, checks its shape and turns it into domain objects.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError

from config import INVENTORY_ENCODING
from models.inventory import Inventory, Repo
from utils.errors import InventoryParseError, InventoryReadError
from utils.logger import get_logger

logger = get_logger(__name__)

_MERGE_TAG = "tag:yaml.org,2002:merge"


class _InventoryLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps scalars as the text written in the file and
    rejects mappings with repeated keys.

    Only null is resolved; `yes`, `0x10` or `2024-01-01` stay strings.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == _MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    # unhashable keys are reported by the base constructor
                    continue
                if duplicate:
                    raise ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicate key {key!r}", key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _construct_text(loader: _InventoryLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


for _tag in ("bool", "int", "float", "timestamp"):
    _InventoryLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _construct_text)


class InventoryRepository:
    """Repository for reading an inventory file from disk."""

    def __init__(self, encoding: str = INVENTORY_ENCODING):
        self.encoding = encoding

    def load(self, path: str | Path) -> Inventory:
        """
        Read and parse a YAML inventory file.

        Args:
            path: Location of the inventory file.

        Returns:
            An Inventory whose repos each carry their mapping key as `name`.

        Raises:
            InventoryReadError: If the file cannot be read.
            InventoryParseError: If the content is not valid YAML or does not
                have the inventory shape.
        """
        logger.debug(f"Reading inventory file {path}")
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read inventory file {path}: {e}")
            raise InventoryReadError(f"cannot read inventory file: {e}") from e

        try:
            raw = yaml.load(text, Loader=_InventoryLoader)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in {path}: {e}")
            raise InventoryParseError(f"invalid YAML: {e}") from e

        try:
            inventory = self._to_inventory(raw)
        except InventoryParseError as e:
            logger.error(f"Unexpected inventory layout in {path}: {e}")
            raise

        # Fill in names from the mapping keys
        for name, repo in inventory.repos.items():
            inventory.repos[name] = replace(repo, name=name)

        logger.info(f"Loaded {len(inventory.repos)} repos for org '{inventory.org}' from {path}")
        return inventory

    # ── Mapping helpers ───────────────────────────────────

    def _to_inventory(self, raw: Any) -> Inventory:
        """Convert the parsed document into an Inventory."""
        if raw is None:
            return Inventory()
        if not isinstance(raw, dict):
            raise InventoryParseError(
                f"invalid YAML: expected a mapping at the top level, got {type(raw).__name__}"
            )

        repos_raw = raw.get("repos")
        if repos_raw is None:
            repos_raw = {}
        elif not isinstance(repos_raw, dict):
            raise InventoryParseError(
                f"invalid YAML: 'repos' must be a mapping, got {type(repos_raw).__name__}"
            )

        repos: dict[str, Repo] = {}
        for key, value in repos_raw.items():
            name = str(key)
            if name in repos:
                raise InventoryParseError(f"invalid YAML: repo '{name}' is defined more than once")
            repos[name] = self._to_repo(name, value)

        return Inventory(org=self._scalar(raw.get("org"), "org"), repos=repos)

    def _to_repo(self, key: str, raw: Any) -> Repo:
        """Convert a single `repos` entry into a Repo."""
        if raw is None:
            return Repo()
        if not isinstance(raw, dict):
            raise InventoryParseError(
                f"invalid YAML: repo '{key}' must be a mapping, got {type(raw).__name__}"
            )
        return Repo(
            name=self._scalar(raw.get("name"), f"{key}.name"),
            tier=self._scalar(raw.get("tier"), f"{key}.tier"),
            priority=self._scalar(raw.get("priority"), f"{key}.priority"),
            pipelines=self._string_list(raw.get("pipelines"), f"{key}.pipelines"),
            description=self._scalar(raw.get("description"), f"{key}.description"),
        )

    @staticmethod
    def _scalar(value: Any, field_name: str) -> str:
        """Return a scalar field as a string ('' when absent or null)."""
        if value is None:
            return ""
        if not isinstance(value, str):
            raise InventoryParseError(
                f"invalid YAML: '{field_name}' must be a scalar, got {type(value).__name__}"
            )
        return value

    @classmethod
    def _string_list(cls, value: Any, field_name: str) -> list[str]:
        """Return a sequence field as a list of strings ([] when absent or null)."""
        if value is None:
            return []
        if not isinstance(value, list):
            raise InventoryParseError(
                f"invalid YAML: '{field_name}' must be a sequence, got {type(value).__name__}"
            )
        return [cls._scalar(item, field_name) for item in value]


def load_inventory(path: str | Path) -> Inventory:
    """Shortcut for `InventoryRepository().load(path)`."""
    return InventoryRepository().load(path)

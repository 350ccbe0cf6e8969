"""
utils/errors.py
---------------
Exceptions raised while loading an inventory file.
"""


class InventoryError(Exception):
    """Base exception for inventory loading errors."""

    pass


class InventoryReadError(InventoryError):
    """Raised when the inventory file cannot be read."""

    pass


class InventoryParseError(InventoryError):
    """Raised when the file is not valid YAML or does not have the inventory shape."""

    pass

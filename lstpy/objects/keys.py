"""Property keys for data objects."""

from enum import StrEnum


class ListKey(StrEnum):
    """Ordered list properties of a data object."""

    NATURAL_WEAPON = "natural_weapon"


class ObjectKey(StrEnum):
    """Scalar properties of a data object."""

    SIZE = "size"

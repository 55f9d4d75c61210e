"""Intermediate Representation (IR) for resolved field types.

This module defines dataclasses that describe the PHP type of one GraphQL
field or argument after wrapper unwrapping, suitable for rendering.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseType:
    """The innermost (non-list) type of a field."""
    type_name: str
    required: bool = False  # True if the leaf is wrapped in NonNull
    is_value_type: bool = False


@dataclass(frozen=True)
class ListType:
    """One ``[...]`` layer of a GraphQL type reference.

    ``inner`` is the next list layer inwards, or None at the innermost list.
    ``required`` is True when this specific list is wrapped in NonNull.
    """
    required: bool = False
    inner: "ListType | None" = None

    @property
    def depth(self) -> int:
        return list_type_depth(self)


@dataclass(frozen=True)
class FieldType:
    """Resolved type of a field or argument.

    ``base_type`` always describes the leaf type, even when lists wrap it.
    """
    base_type: BaseType
    list_type: ListType | None = None

    @property
    def is_list(self) -> bool:
        return self.list_type is not None

    @property
    def depth(self) -> int:
        """Number of list layers wrapping the base type."""
        return list_type_depth(self.list_type)


def list_type_depth(list_type: ListType | None) -> int:
    """Count the list layers in a ``ListType`` chain."""
    depth = 0
    while list_type is not None:
        depth += 1
        list_type = list_type.inner
    return depth

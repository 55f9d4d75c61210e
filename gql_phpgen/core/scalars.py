"""Scalar type tables for PHP code generation.

Maps GraphQL scalar names to PHP type names and tells which PHP types are
primitive value types (those get the ``?`` nullable sigil in declarations).

Example usage:
    from gql_phpgen.core.scalars import ScalarTable

    # Built-in mapping
    scalars = ScalarTable()
    scalars.get("Int")  # "int"

    # Override or extend the mapping
    scalars = ScalarTable({"DateTime": "\\DateTimeImmutable", "Money": "float"})
    scalars.get("Money")  # "float"
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

PHP_SCALARS: Mapping[str, str] = MappingProxyType({
    "ID": "string",
    "String": "string",
    "Boolean": "bool",
    "Int": "int",
    "Float": "float",
    "Date": "DateTime",
})

# Native PHP value types; "double" and "integer"/"boolean" are the gettype()
# spellings a scalar override may use.
PHP_VALUE_TYPES = frozenset({
    "bool",
    "boolean",
    "int",
    "integer",
    "float",
    "double",
})

# Fallback type for scalars without a mapping and for unknown type names
GENERIC_OBJECT_TYPE = "object"


class ScalarTable(Mapping[str, str]):
    """Immutable table of GraphQL scalar name -> PHP type name.

    Built once per generator invocation from the defaults merged with the
    user's overrides, so concurrent generators never share mutable state.

    Example:
        table = ScalarTable({"UUID": "string"})
        table.get("UUID")           # "string"
        table.get("Unknown")        # None
        table.is_value_type("int")  # True
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        defaults: Mapping[str, str] = PHP_SCALARS,
        value_types: frozenset[str] = PHP_VALUE_TYPES,
    ):
        merged = dict(defaults)
        if overrides:
            merged.update(overrides)
        self._scalars = MappingProxyType(merged)
        self._value_types = value_types

    def __getitem__(self, scalar_name: str) -> str:
        return self._scalars[scalar_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scalars)

    def __len__(self) -> int:
        return len(self._scalars)

    def is_value_type(self, type_name: str) -> bool:
        """Check if a PHP type name is a primitive value type."""
        return type_name in self._value_types

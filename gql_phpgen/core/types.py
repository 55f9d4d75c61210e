"""Type resolution and rendering for GraphQL field types.

Turns a GraphQL type reference such as ``[[Int!]]!`` into a ``FieldType``
descriptor, and a ``FieldType`` into PHP type text, either for a property
declaration (``?int``, ``List``) or for a doc comment (``List<int|null>``).
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from graphql import (
    GraphQLSchema,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeNode,
    is_enum_type,
    is_input_object_type,
    is_scalar_type,
)

from .ir import BaseType, FieldType, ListType
from .scalars import GENERIC_OBJECT_TYPE, ScalarTable

logger = logging.getLogger(__name__)


def get_base_type_node(type_node: TypeNode) -> NamedTypeNode:
    """Strip every List and NonNull wrapper from a type node."""
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    assert isinstance(type_node, NamedTypeNode), f"Expected NamedTypeNode, got {type(type_node)}"
    return type_node


def get_list_inner_type_node(type_node: TypeNode) -> TypeNode:
    """Strip list layers (nullable or not), keeping the leaf's own NonNull."""
    while True:
        if isinstance(type_node, ListTypeNode):
            type_node = type_node.type
        elif isinstance(type_node, NonNullTypeNode) and isinstance(type_node.type, ListTypeNode):
            type_node = type_node.type
        else:
            return type_node


def get_list_type_field(type_node: TypeNode) -> ListType | None:
    """Build the ``ListType`` chain for a type node, outermost layer first.

    A NonNull marks the list it directly wraps as required; a NonNull around
    the leaf type does not touch any list layer.
    """
    if isinstance(type_node, ListTypeNode):
        return ListType(required=False, inner=get_list_type_field(type_node.type))
    if isinstance(type_node, NonNullTypeNode):
        list_type = get_list_type_field(type_node.type)
        if isinstance(type_node.type, ListTypeNode):
            return replace(list_type, required=True)
        return list_type
    return None


class TypeResolver:
    """Resolves GraphQL type references against a schema.

    Args:
        schema: Schema used to classify named types
        scalars: Scalar name -> PHP type table
        convert_name: Naming convention applied to input object and enum names
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        scalars: ScalarTable,
        convert_name: Callable[[str], str],
    ):
        self.schema = schema
        self.scalars = scalars
        self.convert_name = convert_name

    def resolve_base_type(self, type_name: str, required: bool) -> BaseType:
        """Classify a named type and map it to a PHP base type."""
        schema_type = self.schema.get_type(type_name)

        if schema_type is None:
            logger.debug("Type %s not found in schema, using %s", type_name, GENERIC_OBJECT_TYPE)
            return BaseType(GENERIC_OBJECT_TYPE, required, False)

        if is_scalar_type(schema_type):
            php_type = self.scalars.get(schema_type.name)
            if php_type:
                return BaseType(php_type, required, self.scalars.is_value_type(php_type))
            logger.debug("No mapping for scalar %s, using %s", schema_type.name, GENERIC_OBJECT_TYPE)
            return BaseType(GENERIC_OBJECT_TYPE, required, False)

        if is_input_object_type(schema_type):
            return BaseType(self.convert_name(schema_type.name), required, False)

        if is_enum_type(schema_type):
            # Enums behave like value types
            return BaseType(self.convert_name(schema_type.name), required, True)

        return BaseType(schema_type.name, required, False)

    def resolve(self, type_node: TypeNode, has_default_value: bool = False) -> FieldType:
        """Resolve a (possibly wrapped) type node into a ``FieldType``.

        A field with a default value is optional for callers even when the
        schema marks it non-null, so the outermost layer (the list if there is
        one, else the base type) is forced to not required.
        """
        inner_type = get_base_type_node(type_node)
        required = isinstance(get_list_inner_type_node(type_node), NonNullTypeNode)
        base_type = self.resolve_base_type(inner_type.name.value, required)
        list_type = get_list_type_field(type_node)

        if has_default_value:
            if list_type is not None:
                list_type = replace(list_type, required=False)
            else:
                base_type = replace(base_type, required=False)

        return FieldType(base_type=base_type, list_type=list_type)


def apply_nullable(type_name: str, required: bool, for_comment: bool, sigil: bool = True) -> str:
    """Mark a type as nullable when it is not required.

    Doc comments use ``type|null``; declarations use ``?type`` when ``sigil``
    is set (reference types are left bare).
    """
    if required:
        return type_name
    if for_comment:
        return f"{type_name}|null"
    if sigil:
        return f"?{type_name}"
    return type_name


def wrap_field_type(
    field_type: FieldType,
    list_type: ListType | None,
    list_type_name: str,
    for_comment: bool = False,
) -> str:
    """Render ``field_type`` starting at the given list layer.

    In comment mode lists are fully parametrized (``List<List<int>>``); in
    declaration mode only the outer collection name is emitted.
    """
    if list_type is not None:
        type_name = list_type_name
        if for_comment:
            inner = wrap_field_type(field_type, list_type.inner, list_type_name, True)
            type_name = f"{type_name}<{inner}>"
        return apply_nullable(type_name, list_type.required, for_comment)

    base_type = field_type.base_type
    return apply_nullable(
        base_type.type_name,
        base_type.required,
        for_comment,
        sigil=base_type.is_value_type,
    )

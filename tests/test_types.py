"""Tests for type resolution and field-type rendering."""

import pytest
from graphql import NamedTypeNode, NonNullTypeNode, build_schema, parse_type

from gql_phpgen.core.ir import BaseType, FieldType, ListType, list_type_depth
from gql_phpgen.core.scalars import ScalarTable
from gql_phpgen.core.types import (
    TypeResolver,
    get_base_type_node,
    get_list_inner_type_node,
    get_list_type_field,
    wrap_field_type,
)
from gql_phpgen.core.utils import keep, upper_case

SDL = """
scalar Date
scalar JSON

enum Color {
  RED
  GREEN
}

input FilterInput {
  name: String
}

type User {
  id: ID!
}

type Scalars {
  i: Int
  f: Float
  b: Boolean
  s: String
}
"""


@pytest.fixture
def schema():
    return build_schema(SDL)


@pytest.fixture
def resolver(schema):
    return TypeResolver(schema, ScalarTable(), keep)


def render(field_type: FieldType, list_type_name: str = "List", for_comment: bool = False) -> str:
    return wrap_field_type(field_type, field_type.list_type, list_type_name, for_comment)


# =============================================================================
# Tests: Type node helpers
# =============================================================================


class TestTypeNodeHelpers:
    """Tests for the wrapper-stripping helpers."""

    def test_base_type_node(self):
        assert get_base_type_node(parse_type("[[Int!]!]")).name.value == "Int"

    def test_list_inner_keeps_leaf_non_null(self):
        inner = get_list_inner_type_node(parse_type("[[Int!]]!"))
        assert isinstance(inner, NonNullTypeNode)

    def test_list_inner_of_nullable_leaf(self):
        inner = get_list_inner_type_node(parse_type("[Int]!"))
        assert isinstance(inner, NamedTypeNode)

    def test_no_list(self):
        assert get_list_type_field(parse_type("Int!")) is None
        assert get_list_type_field(parse_type("Int")) is None

    def test_nullable_list(self):
        assert get_list_type_field(parse_type("[Int!]")) == ListType(required=False, inner=None)

    def test_non_null_binds_to_nearest_list(self):
        assert get_list_type_field(parse_type("[Int]!")) == ListType(required=True, inner=None)

    def test_nested_lists_outer_first(self):
        list_type = get_list_type_field(parse_type("[[Int!]]!"))
        assert list_type == ListType(required=True, inner=ListType(required=False, inner=None))

    def test_inner_list_required(self):
        list_type = get_list_type_field(parse_type("[[Int]!]"))
        assert list_type == ListType(required=False, inner=ListType(required=True, inner=None))

    @pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
    def test_depth(self, depth):
        type_node = parse_type("[" * depth + "Int" + "]" * depth)
        assert list_type_depth(get_list_type_field(type_node)) == depth


# =============================================================================
# Tests: TypeResolver
# =============================================================================


class TestTypeResolver:
    """Tests for TypeResolver.resolve."""

    @pytest.mark.parametrize(
        "scalar, php_type",
        [("ID", "string"), ("String", "string"), ("Boolean", "bool"), ("Int", "int"), ("Float", "float"), ("Date", "DateTime")],
    )
    def test_mapped_scalars(self, resolver, scalar, php_type):
        assert resolver.resolve(parse_type(scalar)).base_type.type_name == php_type

    def test_unmapped_scalar_falls_back_to_object(self, resolver):
        base = resolver.resolve(parse_type("JSON")).base_type
        assert base == BaseType("object", False, False)

    def test_scalar_override(self, schema):
        resolver = TypeResolver(schema, ScalarTable({"JSON": "array"}), keep)
        assert resolver.resolve(parse_type("JSON")).base_type.type_name == "array"

    def test_unknown_type_falls_back_to_object(self, resolver):
        base = resolver.resolve(parse_type("Missing!")).base_type
        assert base == BaseType("object", True, False)

    def test_value_type_flag(self, resolver):
        assert resolver.resolve(parse_type("Int")).base_type.is_value_type
        assert not resolver.resolve(parse_type("String")).base_type.is_value_type

    def test_enum_is_value_type(self, resolver):
        assert resolver.resolve(parse_type("Color")).base_type == BaseType("Color", False, True)

    def test_input_object(self, resolver):
        assert resolver.resolve(parse_type("FilterInput!")).base_type == BaseType("FilterInput", True, False)

    def test_object_type_keeps_name(self, resolver):
        assert resolver.resolve(parse_type("User")).base_type == BaseType("User", False, False)

    def test_naming_convention_applies_to_enums_and_inputs(self, schema):
        resolver = TypeResolver(schema, ScalarTable(), upper_case)
        assert resolver.resolve(parse_type("Color")).base_type.type_name == "COLOR"
        assert resolver.resolve(parse_type("FilterInput")).base_type.type_name == "FILTER_INPUT"
        assert resolver.resolve(parse_type("User")).base_type.type_name == "User"

    def test_leaf_required_independent_of_list(self, resolver):
        field_type = resolver.resolve(parse_type("[Int!]"))
        assert field_type.base_type.required
        assert not field_type.list_type.required

    def test_list_required_independent_of_leaf(self, resolver):
        field_type = resolver.resolve(parse_type("[Int]!"))
        assert not field_type.base_type.required
        assert field_type.list_type.required

    def test_default_value_makes_base_optional(self, resolver):
        field_type = resolver.resolve(parse_type("Int!"), has_default_value=True)
        assert not field_type.base_type.required
        assert field_type.list_type is None

    def test_default_value_only_touches_outer_list(self, resolver):
        field_type = resolver.resolve(parse_type("[[Int!]!]!"), has_default_value=True)
        assert not field_type.list_type.required
        assert field_type.list_type.inner.required
        assert field_type.base_type.required

    def test_without_default_value_non_null_is_required(self, resolver):
        assert resolver.resolve(parse_type("Int!")).base_type.required


# =============================================================================
# Tests: wrap_field_type
# =============================================================================


class TestWrapFieldType:
    """Tests for declaration and comment rendering."""

    def test_required_value_type(self):
        assert render(FieldType(BaseType("int", True, True))) == "int"

    def test_optional_value_type_gets_sigil(self):
        assert render(FieldType(BaseType("int", False, True))) == "?int"

    def test_optional_reference_type_is_bare(self):
        assert render(FieldType(BaseType("string", False, False))) == "string"

    def test_comment_mode_optional(self):
        assert render(FieldType(BaseType("string", False, False)), for_comment=True) == "string|null"
        assert render(FieldType(BaseType("int", False, True)), for_comment=True) == "int|null"

    def test_required_list(self):
        field_type = FieldType(BaseType("int", True, True), ListType(required=True))
        assert render(field_type, "Set") == "Set"
        assert render(field_type, "Set", for_comment=True) == "Set<int>"

    def test_optional_list(self):
        field_type = FieldType(BaseType("int", True, True), ListType(required=False))
        assert render(field_type) == "?List"
        assert render(field_type, for_comment=True) == "List<int>|null"

    def test_nested_comment_nullability_per_layer(self):
        field_type = FieldType(
            BaseType("float", False, True),
            ListType(required=True, inner=ListType(required=False)),
        )
        assert render(field_type, for_comment=True) == "List<List<float|null>|null>"

    @pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
    def test_nesting_depth(self, resolver, depth):
        field_type = resolver.resolve(parse_type("[" * depth + "Int!" + "]" * depth))
        declaration = render(field_type, "Collection")
        comment = render(field_type, "Collection", for_comment=True)

        assert declaration.count("Collection") == min(depth, 1)
        assert comment.count("Collection<") == depth

    def test_default_value_on_required_list(self, resolver):
        field_type = resolver.resolve(parse_type("[String!]!"), has_default_value=True)
        assert render(field_type) == "?List"
        assert render(field_type, for_comment=True) == "List<string>|null"

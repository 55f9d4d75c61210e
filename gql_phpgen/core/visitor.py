"""Schema visitor that turns GraphQL type definitions into PHP declarations."""

import logging
from collections.abc import Sequence

from graphql import (
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    GraphQLSchema,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    StringValueNode,
)
from jinja2 import Environment

from .config import PhpConfig
from .declaration import PhpDeclarationBlock
from .ir import FieldType
from .keywords import PHP_KEYWORDS, safe_name
from .templates import INPUT_OBJECT_METHOD_TEMPLATE, create_environment
from .types import TypeResolver, wrap_field_type
from .utils import indent_multiline, transform_comment

logger = logging.getLogger(__name__)

DEFAULT_DEPRECATION_REASON = "Field no longer supported"


def _description(node) -> str | None:
    return node.description.value if node.description else None


class PhpVisitor:
    """Renders one PHP declaration per schema type definition.

    Object types become classes, interfaces become interfaces, input objects
    become classes with a ``getInputObject()`` method and enums become enums.
    Other definitions (scalars, unions, directives) produce nothing.

    Example:
        visitor = PhpVisitor(schema, PhpConfig())
        declarations = visitor.visit_document(parse(print_schema(schema)))
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        config: PhpConfig | None = None,
        env: Environment | None = None,
    ):
        self.schema = schema
        self.config = config or PhpConfig()
        self.env = env or create_environment(self.config.template_dir)
        self.keywords = PHP_KEYWORDS
        self.convert_name = self.config.get_name_converter()
        self.resolver = TypeResolver(schema, self.config.build_scalars(), self.convert_name)

    def visit(self, document: DocumentNode) -> list[PhpDeclarationBlock]:
        """Build a declaration for every supported definition, in document order."""
        declarations = []
        for definition in document.definitions:
            if isinstance(definition, EnumTypeDefinitionNode):
                declarations.append(self.enum_type_definition(definition))
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                declarations.append(self.interface_type_definition(definition))
            elif isinstance(definition, ObjectTypeDefinitionNode):
                declarations.append(self.object_type_definition(definition))
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                declarations.append(self.input_object_type_definition(definition))
            else:
                logger.debug("Skipping %s", type(definition).__name__)
        return declarations

    def visit_document(self, document: DocumentNode) -> list[str]:
        """Render all supported definitions in document order."""
        return [block.string for block in self.visit(document)]

    def convert_safe_name(self, name: str) -> str:
        """Escape reserved words with ``@``. No case conversion is applied."""
        return safe_name(name, self.keywords)

    def get_enum_value(self, enum_name: str, value_name: str) -> str:
        """Return the configured override for an enum value, or its safe name."""
        override = self.config.enum_values.get(enum_name, {}).get(value_name)
        if override is not None:
            return str(override)
        return self.convert_safe_name(value_name)

    @staticmethod
    def get_deprecation_reason(directive: DirectiveNode) -> str:
        if directive.name.value != "deprecated":
            return ""
        for argument in directive.arguments or ():
            if argument.name.value == "reason" and isinstance(argument.value, StringValueNode):
                return argument.value.value
        return DEFAULT_DEPRECATION_REASON

    def get_field_header(
        self,
        node: FieldDefinitionNode | InputValueDefinitionNode | EnumValueDefinitionNode,
        field_type: FieldType | None = None,
    ) -> str:
        """Doc comment for a member: description, then annotation lines."""
        comment_text = _description(node) or ""
        annotations = []

        # The declared type of a list is the bare collection; document the items
        if field_type is not None and field_type.is_list:
            comment_type = wrap_field_type(field_type, field_type.list_type, self.config.list_type, for_comment=True)
            annotations.append(f"@var {comment_type}")

        for directive in node.directives or ():
            if directive.name.value == "deprecated":
                annotations.append(f"@deprecated {self.get_deprecation_reason(directive)}")

        annotation_text = "\n".join(annotations)
        return transform_comment(f"{comment_text}\n\n{annotation_text}".strip())

    def build_member(self, node: FieldDefinitionNode | InputValueDefinitionNode, has_default_value: bool = False) -> str:
        field_type = self.resolver.resolve(node.type, has_default_value)
        header = self.get_field_header(node, field_type)
        php_type = wrap_field_type(field_type, field_type.list_type, self.config.list_type)
        field_name = self.convert_safe_name(node.name.value)
        return indent_multiline(f"{header}public {php_type} ${field_name};")

    def build_members(self, fields: Sequence[FieldDefinitionNode | InputValueDefinitionNode], inputs: bool = False) -> str:
        return "\n\n".join(
            self.build_member(field, has_default_value=inputs and field.default_value is not None)
            for field in fields
        )

    def enum_value_definition(self, node: EnumValueDefinitionNode, enum_name: str) -> str:
        header = self.get_field_header(node)
        return indent_multiline(header + self.get_enum_value(enum_name, node.name.value))

    def enum_type_definition(self, node: EnumTypeDefinitionNode) -> PhpDeclarationBlock:
        enum_name = node.name.value
        values = ",\n".join(self.enum_value_definition(v, enum_name) for v in node.values or ())
        logger.debug("Rendering enum %s (%d values)", enum_name, len(node.values or ()))

        return (
            PhpDeclarationBlock()
            .access("public")
            .as_kind("enum")
            .with_comment(_description(node))
            .with_name(self.convert_safe_name(self.convert_name(enum_name)))
            .with_block(values or None)
        )

    def object_type_definition(self, node: ObjectTypeDefinitionNode) -> PhpDeclarationBlock:
        logger.debug("Rendering class %s", node.name.value)
        return (
            PhpDeclarationBlock()
            .access("public")
            .as_kind("class")
            .with_comment(_description(node))
            .with_name(self.convert_safe_name(node.name.value))
            .implements([i.name.value for i in node.interfaces or ()])
            .with_block(self.build_members(node.fields or ()) or None)
        )

    def interface_type_definition(self, node: InterfaceTypeDefinitionNode) -> PhpDeclarationBlock:
        logger.debug("Rendering interface %s", node.name.value)
        return (
            PhpDeclarationBlock()
            .access("public")
            .as_kind("interface")
            .with_comment(_description(node))
            .with_name(self.convert_safe_name(node.name.value))
            .with_block(self.build_members(node.fields or ()) or None)
        )

    def input_object_type_definition(self, node: InputObjectTypeDefinitionNode) -> PhpDeclarationBlock:
        logger.debug("Rendering input class %s", node.name.value)
        method = self.env.get_template(INPUT_OBJECT_METHOD_TEMPLATE).render()
        members = self.build_members(node.fields or (), inputs=True)
        block = "\n\n".join(part for part in (members, indent_multiline(method)) if part)

        return (
            PhpDeclarationBlock()
            .access("public")
            .as_kind("class")
            .with_comment(_description(node))
            .with_name(self.convert_safe_name(self.convert_name(node.name.value)))
            .with_block(block)
        )

"""PHP code generator for GraphQL schemas.

Prints the schema back to SDL, walks its type definitions with
``PhpVisitor`` and renders the declarations into ``file.php.j2``.

Supports custom templates via the template_dir parameter:
    generator = PhpGenerator(schema, config, template_dir="./my_templates")
"""

import logging
import os
from pathlib import Path

from graphql import GraphQLSchema, build_schema, parse, print_schema

from .config import PhpConfig
from .declaration import PhpDeclarationBlock
from .errors import InvalidOutputFileError
from .hooks import HookRunner
from .keywords import safe_name
from .templates import FILE_TEMPLATE, create_environment
from .visitor import PhpVisitor

logger = logging.getLogger(__name__)

PHP_EXTENSION = ".php"


def validate_output_file(output_file: str | os.PathLike) -> None:
    """Reject output files that do not end in ``.php``."""
    if Path(output_file).suffix != PHP_EXTENSION:
        raise InvalidOutputFileError(str(output_file))


class PhpGenerator:
    """Generates one PHP source file from a GraphQL schema.

    Example:
        generator = PhpGenerator(schema, PhpConfig(namespace_name="App\\\\Gql"))
        code = generator.generate()
        generator.write("src/Types.php")
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        config: PhpConfig | None = None,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the code generator.

        Args:
            schema: The schema to generate declarations for
            config: Generator options; defaults apply when omitted
            template_dir: Optional directory with custom Jinja2 templates.
                          Overrides ``config.template_dir``.
            hooks: Optional pre/post generation hooks
        """
        self.schema = schema
        self.config = config or PhpConfig()
        self.hooks = hooks or HookRunner()
        self.env = create_environment(template_dir or self.config.template_dir)
        self.visitor = PhpVisitor(schema, self.config, env=self.env)

    def render_declarations(self) -> list[str]:
        """Render every supported type definition, in schema print order."""
        document = parse(print_schema(self.schema))
        document = self.hooks.run_pre_hooks(document)
        blocks = self.visitor.visit(document)
        logger.debug("Rendered %d declarations", len(blocks))

        if self.config.wrap_types and blocks:
            return [self._wrap(blocks).string]
        return [block.string for block in blocks]

    def _wrap(self, blocks: list[PhpDeclarationBlock]) -> PhpDeclarationBlock:
        """Nest all declarations inside ``public class <className>``."""
        wrapper = PhpDeclarationBlock().access("public").as_kind("class").with_name(safe_name(self.config.class_name))
        for block in blocks:
            wrapper.nested_class(block)
        return wrapper

    def generate(self, filename: str = "") -> str:
        """Generate the complete PHP file content."""
        content = "\n".join(self.render_declarations())
        template = self.env.get_template(FILE_TEMPLATE)
        code = template.render(namespace_name=self.config.namespace_name, content=content)
        return self.hooks.run_post_hooks(filename, code)

    def write(self, output_file: str | os.PathLike) -> Path:
        """Validate the output path, generate and write the file."""
        validate_output_file(output_file)
        output_path = Path(output_file)
        code = self.generate(output_path.name)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(code)
        logger.debug("Wrote %s", output_path)
        return output_path


def generate_php(schema: GraphQLSchema | str, config: PhpConfig | dict | None = None) -> str:
    """Generate PHP source from a schema object or an SDL string."""
    if isinstance(schema, str):
        schema = build_schema(schema)
    if not isinstance(config, PhpConfig):
        config = PhpConfig.from_raw(config)
    return PhpGenerator(schema, config).generate()

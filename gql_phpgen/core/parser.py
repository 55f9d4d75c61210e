"""GraphQL schema loader using graphql-core.

Reads .graphql/.graphqls files and builds a GraphQLSchema.
"""

import logging
import os

from graphql import GraphQLError, GraphQLSchema, build_ast_schema, concat_ast, parse

from .errors import SchemaLoadError

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")


class SchemaLoader:
    """Loads GraphQL schema files into a schema object."""

    def __init__(self, schema_path: str):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = schema_path

    def load(self) -> GraphQLSchema:
        """Parse all schema files and build one schema from them."""
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise SchemaLoadError(f"No schema files found in {self.schema_path}", self.schema_path)

        documents = []
        for file_path in schema_files:
            logger.debug("Parsing %s", file_path)
            with open(file_path) as f:
                content = f.read()
            try:
                documents.append(parse(content))
            except GraphQLError as e:
                raise SchemaLoadError(f"Error parsing {os.path.basename(file_path)}: {e}", file_path) from e

        try:
            return build_ast_schema(concat_ast(documents))
        except (GraphQLError, TypeError) as e:
            raise SchemaLoadError(f"Invalid schema in {self.schema_path}: {e}", self.schema_path) from e

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)

"""Tests for the schema loader."""

import pytest

from gql_phpgen.core.errors import SchemaLoadError
from gql_phpgen.core.parser import SchemaLoader


class TestSchemaLoader:
    """Tests for SchemaLoader."""

    def test_single_file(self, tmp_path):
        path = tmp_path / "schema.graphqls"
        path.write_text("type User { id: ID! }")
        schema = SchemaLoader(str(path)).load()
        assert schema.get_type("User") is not None

    def test_directory_is_merged(self, tmp_path):
        (tmp_path / "a.graphql").write_text("type User { role: Role }")
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "b.graphqls").write_text("enum Role { ADMIN }")
        (tmp_path / "notes.txt").write_text("not a schema")

        schema = SchemaLoader(str(tmp_path)).load()
        assert schema.get_type("User") is not None
        assert schema.get_type("Role") is not None

    def test_type_extensions(self, tmp_path):
        (tmp_path / "a.graphqls").write_text("type User { id: ID! }")
        (tmp_path / "b.graphqls").write_text("extend type User { name: String }")
        schema = SchemaLoader(str(tmp_path)).load()
        assert set(schema.get_type("User").fields) == {"id", "name"}

    def test_no_files(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="No schema files"):
            SchemaLoader(str(tmp_path)).load()

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "broken.graphqls"
        path.write_text("type User {")
        with pytest.raises(SchemaLoadError, match="broken.graphqls") as exc_info:
            SchemaLoader(str(path)).load()
        assert exc_info.value.path == str(path)

    def test_invalid_schema(self, tmp_path):
        path = tmp_path / "schema.graphqls"
        path.write_text("type User { id: Missing }")
        with pytest.raises(SchemaLoadError, match="Invalid schema"):
            SchemaLoader(str(path)).load()

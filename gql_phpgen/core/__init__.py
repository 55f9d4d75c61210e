"""Core modules for GraphQL to PHP code generation."""

from .config import PhpConfig, load_config
from .declaration import Access, Kind, PhpDeclarationBlock
from .errors import ConfigError, InvalidOutputFileError, PhpGenError, SchemaLoadError
from .generator import PhpGenerator, generate_php, validate_output_file
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import BaseType, FieldType, ListType, list_type_depth
from .keywords import PHP_KEYWORDS, safe_name
from .parser import SchemaLoader
from .scalars import PHP_SCALARS, PHP_VALUE_TYPES, ScalarTable
from .types import TypeResolver, wrap_field_type
from .visitor import PhpVisitor

__all__ = [
    # Config
    "PhpConfig",
    "load_config",
    # Errors
    "PhpGenError",
    "ConfigError",
    "SchemaLoadError",
    "InvalidOutputFileError",
    # Tables
    "PHP_SCALARS",
    "PHP_VALUE_TYPES",
    "PHP_KEYWORDS",
    "ScalarTable",
    "safe_name",
    # IR types
    "BaseType",
    "FieldType",
    "ListType",
    "list_type_depth",
    # Types
    "TypeResolver",
    "wrap_field_type",
    # Declarations
    "Access",
    "Kind",
    "PhpDeclarationBlock",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Loader
    "SchemaLoader",
    # Generation
    "PhpVisitor",
    "PhpGenerator",
    "generate_php",
    "validate_output_file",
]

"""Generation hooks for customizing code generation.

Pre-generation hooks receive the parsed schema document before any
declaration is rendered; post-generation hooks receive the finished PHP
source before it is written.

Example usage:
    from gql_phpgen.core.hooks import AddHeaderHook, FilterTypesHook, HookRunner

    hooks = HookRunner()
    hooks.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
    hooks.add_post_hook(AddHeaderHook("// Auto-generated - do not edit"))
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode

PHP_OPEN_TAG = "<?php"


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Example:
        class DropUnions(PreGenerateHook):
            def pre_generate(self, document: DocumentNode) -> DocumentNode:
                return DocumentNode(definitions=tuple(
                    d for d in document.definitions
                    if not isinstance(d, UnionTypeDefinitionNode)
                ))
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before code generation.

        Args:
            document: The printed-and-reparsed schema document

        Returns:
            The (possibly modified) document to render
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks."""

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The output file name (e.g., "Types.php")
            content: The generated PHP source

        Returns:
            The (possibly transformed) source to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header comment to generated files.

    The header goes right after the ``<?php`` open tag so the file still
    starts with it.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        header = self.header if self.header.endswith("\n") else self.header + "\n"
        if content.startswith(PHP_OPEN_TAG):
            rest = content[len(PHP_OPEN_TAG):].lstrip("\n")
            return f"{PHP_OPEN_TAG}\n{header}\n{rest}"
        return f"{header}\n{content}"


class FilterTypesHook:
    """Built-in hook to filter type definitions by name prefix/suffix.

    Definitions without a name (e.g. ``schema { ... }``) are always kept.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Drop definitions whose names fail the filters."""
        definitions = tuple(
            d for d in document.definitions
            if getattr(d, "name", None) is None or self._should_include(d.name.value)
        )
        return DocumentNode(definitions=definitions)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content

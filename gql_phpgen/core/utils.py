"""Text helpers shared by the PHP generator."""

import re
from collections.abc import Callable

INDENT = "  "


def snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    return "".join(word.capitalize() for word in snake_case(name).split("_"))


def upper_case(name: str) -> str:
    """Convert to UPPER_CASE."""
    return snake_case(name).upper()


def keep(name: str) -> str:
    return name


NAMING_CONVENTIONS: dict[str, Callable[[str], str]] = {
    "keep": keep,
    "pascal_case": pascal_case,
    "upper_case": upper_case,
}


def indent(text: str, count: int = 1) -> str:
    """Indent a single line by ``count`` levels."""
    return INDENT * count + text


def indent_multiline(text: str, count: int = 1) -> str:
    """Indent every non-empty line of ``text`` by ``count`` levels."""
    return "\n".join(indent(line, count) if line else line for line in text.split("\n"))


def transform_comment(comment: str | None, indent_level: int = 0) -> str:
    """Render a description as a ``/** ... */`` doc block.

    Returns an empty string for an empty description, otherwise the block
    followed by a newline so it can be prepended to a declaration.
    """
    if not comment:
        return ""
    comment = comment.lstrip().replace("*/", "*\\/")
    lines = ["/**", *(f" * {line}" for line in comment.split("\n")), " */"]
    return "\n".join(indent(line, indent_level) for line in lines) + "\n"

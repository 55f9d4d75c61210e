"""Builder for a single PHP declaration (class, interface or enum).

Example:
    block = (
        PhpDeclarationBlock()
        .access("public")
        .as_kind("class")
        .with_name("User")
        .implements(["Node"])
        .with_block("  public int $id;")
    )
    print(block.string)
    # public class User : Node {
    #   public int $id;
    # }
"""

from typing import Literal

from .utils import indent_multiline, transform_comment

Access = Literal["private", "public", "protected"]
Kind = Literal["class", "interface", "enum"]


class PhpDeclarationBlock:
    """Fluent builder for one declaration.

    Every configuration method returns the builder itself. A block without a
    kind renders as a bare ``{ ... }`` with no header line.
    """

    def __init__(self):
        self._name: str | None = None
        self._extends: list[str] = []
        self._implements: list[str] = []
        self._kind: Kind | None = None
        self._access: Access | None = None
        self._final = False
        self._static = False
        self._block: str | None = None
        self._comment: str | None = None
        self._annotations: list[str] = []
        self._nested: list["PhpDeclarationBlock"] = []

    def nested_class(self, block: "PhpDeclarationBlock") -> "PhpDeclarationBlock":
        self._nested.append(block)
        return self

    def access(self, access: Access | None) -> "PhpDeclarationBlock":
        self._access = access
        return self

    def as_kind(self, kind: Kind) -> "PhpDeclarationBlock":
        self._kind = kind
        return self

    def final(self) -> "PhpDeclarationBlock":
        self._final = True
        return self

    def static(self) -> "PhpDeclarationBlock":
        self._static = True
        return self

    def annotate(self, annotations: list[str]) -> "PhpDeclarationBlock":
        self._annotations = list(annotations)
        return self

    def with_comment(self, comment: str | None) -> "PhpDeclarationBlock":
        """Set the doc comment from a raw description; empty means none."""
        if comment:
            self._comment = transform_comment(comment)
        return self

    def with_block(self, block: str | None) -> "PhpDeclarationBlock":
        self._block = block
        return self

    def extends(self, names: list[str]) -> "PhpDeclarationBlock":
        self._extends = list(names)
        return self

    def implements(self, names: list[str]) -> "PhpDeclarationBlock":
        self._implements = list(names)
        return self

    def with_name(self, name: str) -> "PhpDeclarationBlock":
        self._name = name
        return self

    def _header(self) -> str:
        annotations = "".join(f"@{a}\n" for a in self._annotations)
        modifiers = [self._access, "static" if self._static else None, "final" if self._final else None]
        words = [w for w in modifiers if w]
        words.append(self._kind)
        if self._name:
            words.append(self._name)
        header = " ".join(words)
        # extends and implements share the same separator
        if self._extends:
            header += f" : {', '.join(self._extends)}"
        if self._implements:
            header += f" : {', '.join(self._implements)}"
        return f"{annotations}{header} "

    @property
    def string(self) -> str:
        """Render the declaration; always ends with exactly one newline."""
        result = self._header() if self._kind else ""

        nested = None
        if self._nested:
            nested = "\n\n".join(indent_multiline(n.string.rstrip("\n")) for n in self._nested)

        parts = ["{", nested, self._block, "}"]
        result += "\n".join(p for p in parts if p)

        return (self._comment or "") + result + "\n"

    def __str__(self) -> str:
        return self.string

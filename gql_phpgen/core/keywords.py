"""Reserved PHP identifiers and the safe-name rule."""

from collections.abc import Collection

# PHP reserved keywords that cannot be used as identifiers
PHP_KEYWORDS = frozenset({
    "__halt_compiler", "abstract", "and", "array", "as", "break", "callable",
    "case", "catch", "class", "clone", "const", "continue", "declare",
    "default", "die", "do", "echo", "else", "elseif", "empty", "enddeclare",
    "endfor", "endforeach", "endif", "endswitch", "endwhile", "enum", "eval",
    "exit", "extends", "final", "finally", "fn", "for", "foreach", "function",
    "global", "goto", "if", "implements", "include", "include_once",
    "instanceof", "insteadof", "interface", "isset", "list", "match",
    "namespace", "new", "or", "print", "private", "protected", "public",
    "readonly", "require", "require_once", "return", "static", "switch",
    "throw", "trait", "try", "unset", "use", "var", "while", "xor", "yield",
    "__CLASS__", "__DIR__", "__FILE__", "__FUNCTION__", "__LINE__",
    "__METHOD__", "__NAMESPACE__", "__TRAIT__",
})


def safe_name(name: str, keywords: Collection[str] = PHP_KEYWORDS) -> str:
    """Prefix a reserved identifier with ``@``; return other names verbatim."""
    if name in keywords:
        return f"@{name}"
    return name

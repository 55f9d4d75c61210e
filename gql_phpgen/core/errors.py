"""Exceptions raised by gql-phpgen."""


class PhpGenError(Exception):
    """Base class for all gql-phpgen errors."""


class ConfigError(PhpGenError):
    """Raised when a generator configuration is invalid or unreadable."""


class SchemaLoadError(PhpGenError):
    """Raised when schema files cannot be found or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidOutputFileError(PhpGenError):
    """Raised when the output file does not carry the ``.php`` extension."""

    def __init__(self, output_file: str):
        super().__init__(f'Plugin "php" requires extension to be ".php"! Got: {output_file}')
        self.output_file = output_file

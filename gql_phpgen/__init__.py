"""GraphQL schema to PHP declaration generator."""

__version__ = "0.1.0"

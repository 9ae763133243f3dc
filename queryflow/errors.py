"""
Error taxonomy.

The domain is closed, so only edge creation against a missing node is a
runtime failure. The other classes mark programming or setup mistakes.
"""


class QueryflowError(Exception):
    """Base class for queryflow errors."""


class InvalidReference(QueryflowError, ValueError):
    """An edge referenced a node id that is not in the graph."""

    def __init__(self, node_id: str, role: str) -> None:
        self.node_id = node_id
        self.role = role
        super().__init__(f"{role.capitalize()} node {node_id} not found")


class UnknownNodeKind(QueryflowError, KeyError):
    """A label outside the node-kind catalog was looked up."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Unknown node kind: {self.label!r}"


class ConfigError(QueryflowError, ValueError):
    """Invalid session configuration."""

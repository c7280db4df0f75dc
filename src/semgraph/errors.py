# semgraph/errors.py
"""Exceptions raised by semgraph.

Malformed triples are never errors (they are dropped during ingestion). These
exceptions cover malformed calls: bad constructor arguments, incomplete
resolver bundles and lookups of IRIs that are not in the graph. File read
failures surface as the builtin ``OSError``.
"""
from __future__ import annotations


class SemanticGraphError(Exception):
    """Base class for every semgraph error."""


class InvalidArgumentError(SemanticGraphError, TypeError):
    """Constructor received a value of the wrong shape."""


class ConfigurationError(SemanticGraphError, ValueError):
    """Resolver bundle or optional dependency is missing what the graph needs."""

    def __init__(self, missing: list[str], message: str | None = None):
        self.missing = list(missing)
        super().__init__(message or "Resolver bundle is missing required capabilities: " + ", ".join(self.missing))


class NotFoundError(SemanticGraphError, KeyError):
    """An IRI was dereferenced but has no node in the graph."""

    def __init__(self, iri: str, kind: str = "Node"):
        self.iri = iri
        self.kind = kind
        super().__init__(iri)

    def __str__(self) -> str:
        return f"{self.kind} not found: {self.iri}"


class FatalStartupError(SemanticGraphError, RuntimeError):
    """The base vocabulary could not be loaded."""

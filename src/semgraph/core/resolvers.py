# semgraph/core/resolvers.py
"""Resolver bundle contract.

A resolver bundle connects graph nodes to application values. The core only
calls the capabilities in ``REQUIRED_RESOLVERS``; anything else on the bundle
is passed through untouched for downstream type builders.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Protocol, runtime_checkable

from ..errors import ConfigurationError

REQUIRED_RESOLVERS = (
    "resolve_resource",
    "resolve_source_class_iri",
)


@runtime_checkable
class Resolvers(Protocol):
    def resolve_resource(self, external_id: str, context: Any, info: Any) -> Any:
        """Application value for ``external_id``, or None."""

    def resolve_source_class_iri(self, source: Any) -> str:
        """Most specific class IRI of an application value."""


def validate_resolvers(bundle):
    """Return ``bundle`` (mappings become namespaces) or raise ConfigurationError."""
    if isinstance(bundle, Mapping):
        bad = [k for k in bundle if not isinstance(k, str)]
        if bad:
            missing = [n for n in REQUIRED_RESOLVERS if n not in bundle]
            raise ConfigurationError(missing, f"Resolver names must be strings, got {bad!r}")
        bundle = SimpleNamespace(**bundle)
    missing = [name for name in REQUIRED_RESOLVERS if not callable(getattr(bundle, name, None))]
    if missing:
        raise ConfigurationError(missing)
    return bundle


class ResolverSet:
    """Validated bundle. Extra capabilities are reachable as plain attributes."""

    def __init__(self, bundle):
        self._bundle = validate_resolvers(bundle)

    def resolve_resource(self, external_id, context=None, info=None):
        return self._bundle.resolve_resource(external_id, context, info)

    def resolve_source_class_iri(self, source) -> str:
        return self._bundle.resolve_source_class_iri(source)

    def has(self, name: str) -> bool:
        return callable(getattr(self._bundle, name, None))

    def __getattr__(self, name):
        # only reached for names not defined on ResolverSet
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._bundle, name)

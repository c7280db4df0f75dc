# semgraph/core/index.py
"""Triple index: nodes keyed by IRI, forward and inverse entries per predicate.

A node maps each predicate to the ordered list of its objects, and each
``inverse(predicate)`` to the ordered list of subjects pointing at it. Lists
keep ingestion order. ``index_triple`` is the only entry point that keeps the
two directions consistent; ``upsert`` appends blindly.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Optional

from rdflib import BNode, Literal

from .iri import is_valid_iri

_log = logging.getLogger(__name__)

INVERSE_PREFIX = "_"


def inverse(predicate: str) -> str:
    """Key of the incoming index for ``predicate``. Never a valid IRI."""
    return INVERSE_PREFIX + predicate


class Triple(NamedTuple):
    subject: str
    predicate: str
    object: Any


def to_value(term):
    """rdflib term -> index value: IRIs as plain str, blank nodes as ``_:id``, literals as is."""
    if isinstance(term, Literal):
        return term
    if isinstance(term, BNode):
        return "_:" + str(term)
    if isinstance(term, str):
        return str(term)
    return term


def as_triple(value) -> Optional[Triple]:
    """Coerce a Triple, mapping or 3-sequence; None when the shape is wrong.

    Elements are normalized with ``to_value`` so an rdflib ``URIRef`` and the
    equal plain string address the same node.
    """
    if isinstance(value, Mapping):
        parts = (value.get("subject"), value.get("predicate"), value.get("object"))
    elif isinstance(value, (tuple, list)) and len(value) == 3:
        parts = value
    else:
        return None
    return Triple(*(to_value(v) for v in parts))


class Node(dict):
    """Predicate (or inverse predicate) -> ordered values of one IRI."""

    __slots__ = ("local_name", "field_config", "field_config_extensions")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_name: Optional[str] = None
        self.field_config: Optional[dict] = None
        self.field_config_extensions: Optional[dict] = None

    def objects(self, predicate: str) -> list:
        return self.get(predicate, [])

    def inverse_values(self, predicate: str) -> list:
        return self.get(inverse(predicate), [])

    def first(self, predicate: str, default=None):
        vals = self.get(predicate)
        return vals[0] if vals else default

    def copy(self) -> "Node":
        node = Node({k: list(v) for k, v in self.items()})
        node.local_name = self.local_name
        node.field_config = self.field_config
        if self.field_config_extensions is not None:
            node.field_config_extensions = dict(self.field_config_extensions)
        return node

    def __repr__(self) -> str:
        return f"Node({dict.__repr__(self)})"


class NodeIndex(dict):
    """IRI -> Node.

    Built from a ``parent`` index, it starts as a shallow copy: nodes are
    shared with the parent until the first write, which replaces the shared
    node by a private copy. The parent is never mutated through this index.
    """

    def __init__(self, parent: Optional[Mapping[str, Node]] = None):
        super().__init__(parent or {})
        self._inherited = set(parent or ())

    def writable(self, iri: str) -> Node:
        node = self.get(iri)
        if node is None:
            node = self[iri] = Node()
        elif iri in self._inherited:
            node = self[iri] = node.copy()
            self._inherited.discard(iri)
        return node

    def __setitem__(self, iri, node) -> None:
        self._inherited.discard(iri)
        super().__setitem__(iri, node)

    def __delitem__(self, iri) -> None:
        self._inherited.discard(iri)
        super().__delitem__(iri)

    def count_triples(self) -> int:
        return sum(len(vals) for node in self.values() for key, vals in node.items()
                   if not key.startswith(INVERSE_PREFIX))


def upsert(graph: NodeIndex, subject: str, predicate: str, value) -> None:
    graph.writable(subject).setdefault(predicate, []).append(value)


def has_triple(graph: Mapping[str, Node], subject: str, predicate: str, obj) -> bool:
    node = graph.get(subject)
    return node is not None and obj in node.get(predicate, ())


def index_triple(graph: NodeIndex, triple) -> bool:
    """Index one triple in both directions. Returns False when nothing was written."""
    t = as_triple(triple)
    if t is None:
        _log.debug("skipping malformed triple: %r", triple)
        return False
    subject, predicate, obj = t
    if not (is_valid_iri(subject) and is_valid_iri(predicate)):
        _log.debug("skipping triple with invalid subject or predicate: %r %r", subject, predicate)
        return False
    if has_triple(graph, subject, predicate, obj):
        return False
    upsert(graph, subject, predicate, obj)
    if is_valid_iri(obj):
        upsert(graph, obj, inverse(predicate), subject)
    return True

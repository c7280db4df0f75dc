# semgraph/graph.py
"""SemanticGraph: a triple index seeded with RDF/RDFS/OWL, plus type resolution.

Every instance starts from the process-wide base vocabulary. Nodes inherited
from it are shared until the instance first writes to them, at which point
the instance works on its own copy, so instances never see each other's
mutations and the base vocabulary stays as loaded.
"""
from __future__ import annotations

import logging
import uuid
from numbers import Number
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from graphql import GraphQLField, GraphQLInterfaceType, GraphQLObjectType, GraphQLString
from rdflib.util import guess_format

from .config import GraphConfig
from .core import schema
from .core.cache import TypeCache
from .core.fields import field_from_config, merge_field
from .core.index import Node, NodeIndex, Triple, as_triple, index_triple
from .core.iri import get_iri_local_name, is_valid_iri
from .core.resolvers import ResolverSet, Resolvers
from .core.vocabulary import BASE_PREFIXES, RDFS_DOMAIN, get_base_graph, parse_triples
from .errors import InvalidArgumentError, NotFoundError
from .relay import require_graphql_relay

_log = logging.getLogger(__name__)

UTF8 = "utf-8"
CUSTOM_FIELD_NS = "urn:semgraph:field:"


def is_custom_field_iri(value) -> bool:
    return isinstance(value, str) and value.startswith(CUSTOM_FIELD_NS)


class SemanticGraph:

    def __init__(self, resolvers: Union[Resolvers, Mapping[str, Any]], config: Union[GraphConfig, Mapping, None] = None):
        if resolvers is None or isinstance(resolvers, (str, bytes, Number)):
            raise InvalidArgumentError("Expected first arg to be a resolver object")
        self.config = GraphConfig.from_value(config)
        self.resolvers = ResolverSet(resolvers)

        self.nodes = NodeIndex(get_base_graph())
        self.cache = TypeCache()

        # caller prefixes override the defaults
        self.config.prefixes = {**BASE_PREFIXES, **self.config.prefixes}

        self.node_interface: Optional[GraphQLInterfaceType] = None
        self.node_field: Optional[GraphQLField] = None
        if self.config.relay:
            defs = require_graphql_relay().node_definitions(self._resolve_node, self._resolve_type)
            self.node_interface, self.node_field = defs.node_interface, defs.node_field

    # ---------------- Identity (relay) ----------------

    def _resolve_node(self, global_id: str, info=None):
        external_id = require_graphql_relay().from_global_id(global_id).id
        return self.resolvers.resolve_resource(external_id, getattr(info, "context", None), info)

    def _resolve_type(self, value, info=None, abstract_type=None) -> str:
        """Name of the object type of an application value, for abstract type resolution."""
        return self.get_object_type(self.resolvers.resolve_source_class_iri(value)).name

    # ---------------- Mapping protocol ----------------

    def __contains__(self, iri) -> bool:
        return iri in self.nodes

    def __getitem__(self, iri: str) -> Node:
        try:
            return self.nodes[iri]
        except KeyError:
            raise NotFoundError(iri) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return "[SemanticGraph]"

    __repr__ = __str__

    def _require(self, iri: str, kind: str = "Node") -> Node:
        node = self.nodes.get(iri)
        if node is None:
            raise NotFoundError(iri, kind)
        return node

    # ---------------- Ingestion ----------------

    def add_triple(self, triple) -> bool:
        """Index one triple. Malformed triples and reserved-namespace IRIs are dropped."""
        t = as_triple(triple)
        if t is None:
            _log.debug("dropping malformed triple: %r", triple)
            return False
        if is_custom_field_iri(t.subject) or is_custom_field_iri(t.object):
            _log.debug("dropping triple in reserved field namespace: %r", t)
            return False
        return index_triple(self.nodes, t)

    def parse(self, data: Union[str, bytes], format: str = "turtle", base: Optional[str] = None) -> int:
        """Decode ``data`` and index its triples in order. Returns how many were new."""
        n = 0
        for t in parse_triples(data=data, format=format, base=base):
            if self.add_triple(t):
                n += 1
        _log.debug("parsed %d new triples (%s)", n, format)
        return n

    def parse_file(self, path: Union[str, Path], format: Optional[str] = None,
                   encoding: str = UTF8, base: Optional[str] = None) -> int:
        path = Path(path)
        data = path.read_text(encoding=encoding)
        fmt = format or guess_format(str(path)) or "turtle"
        return self.parse(data, format=fmt, base=base or path.resolve().as_uri())

    # ---------------- Reads ----------------

    def get_local_name(self, iri: str) -> str:
        node = self._require(iri)
        # pure function of the iri, so safe to memoize on a shared base node
        if node.local_name is None:
            node.local_name = get_iri_local_name(iri)
        return node.local_name

    def expand(self, curie: str) -> str:
        """``prefix:Local`` -> full IRI using this graph's prefixes."""
        prefix, sep, local = curie.partition(":")
        if sep and prefix in self.config.prefixes:
            return self.config.prefixes[prefix] + local
        return curie

    def get_superclasses(self, iri: str) -> List[str]:
        self._require(iri, "Class")
        return schema.superclasses(self.nodes, iri)

    def get_subclasses(self, iri: str) -> List[str]:
        self._require(iri, "Class")
        return schema.subclasses(self.nodes, iri)

    def get_field_properties(self, class_iri: str) -> List[str]:
        self._require(class_iri, "Class")
        return schema.field_properties(self.nodes, class_iri)

    # ---------------- Type resolution ----------------

    def get_object_type(self, iri: str) -> GraphQLObjectType:
        self._require(iri, "Class")
        return self.cache.get_or_build("object", iri, lambda: schema.build_object_type(self, iri))

    def get_interface_type(self, iri: str) -> GraphQLInterfaceType:
        self._require(iri, "Class")
        return self.cache.get_or_build("interface", iri, lambda: schema.build_interface_type(self, iri))

    def get_edge_type(self, iri: str) -> GraphQLObjectType:
        return self._connection_definitions(iri).edge_type

    def get_connection_type(self, iri: str) -> GraphQLObjectType:
        return self._connection_definitions(iri).connection_type

    def _connection_definitions(self, iri: str):
        self._require(iri, "Class")
        return self.cache.get_or_build("connection", iri, lambda: schema.build_connection_definitions(self, iri))

    # ---------------- Field extensions ----------------

    def add_field_on_object_type(self, class_iri: str, field_name: str, field_config: Dict[str, Any]) -> str:
        """Attach a synthetic field to ``class_iri``. Returns the new field IRI.

        Every call mints a fresh IRI, so registering the same name twice gives
        two distinct fields. Keep the returned IRI to extend the field later.
        """
        self._require(class_iri, "Class")
        iri = f"{CUSTOM_FIELD_NS}{uuid.uuid4().hex}#{field_name}"
        if not field_name or not is_valid_iri(iri):
            raise InvalidArgumentError(f"Invalid field name: {field_name!r}")
        field_from_config(field_config)
        self.nodes.writable(iri).field_config = field_config
        index_triple(self.nodes, Triple(iri, RDFS_DOMAIN, class_iri))
        self._invalidate()
        _log.debug("added field %s on %s", iri, class_iri)
        return iri

    def extend_field_on_object_type(self, class_iri: str, property_iri: str, extension: Dict[str, Any]) -> None:
        self._require(class_iri, "Class")
        merge_field(GraphQLField(GraphQLString), extension)
        node = self.nodes.writable(class_iri)
        if node.field_config_extensions is None:
            node.field_config_extensions = {}
        node.field_config_extensions[property_iri] = extension
        self._invalidate()

    def _invalidate(self) -> None:
        # cached types of other classes reference the changed one through their fields
        n = self.cache.invalidate()
        _log.debug("field registry changed, dropped %d cached types", n)

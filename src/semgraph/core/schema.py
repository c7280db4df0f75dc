# semgraph/core/schema.py
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLFieldMap,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)
from rdflib.namespace import XSD

from ..relay import require_graphql_relay
from .fields import PROPERTY_IRI, field_from_config, merge_field
from .index import Node
from .iri import is_valid_iri
from .vocabulary import (
    OWL_FUNCTIONAL_PROPERTY, RDF_TYPE, RDFS_COMMENT, RDFS_DATATYPE, RDFS_DOMAIN,
    RDFS_LITERAL, RDFS_RANGE, RDFS_SUBCLASS_OF, XSD_NS,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..graph import SemanticGraph

NAME_RE = re.compile(r"[^_0-9A-Za-z]")

XSD_SCALARS = {
    str(XSD.string): GraphQLString,
    str(XSD.boolean): GraphQLBoolean,
    str(XSD.decimal): GraphQLFloat,
    str(XSD.float): GraphQLFloat,
    str(XSD.double): GraphQLFloat,
    str(XSD.integer): GraphQLInt,
    str(XSD.int): GraphQLInt,
    str(XSD.long): GraphQLInt,
    str(XSD.short): GraphQLInt,
    str(XSD.byte): GraphQLInt,
    str(XSD.nonNegativeInteger): GraphQLInt,
    str(XSD.nonPositiveInteger): GraphQLInt,
    str(XSD.positiveInteger): GraphQLInt,
    str(XSD.negativeInteger): GraphQLInt,
    str(XSD.unsignedInt): GraphQLInt,
    str(XSD.unsignedLong): GraphQLInt,
    str(XSD.unsignedShort): GraphQLInt,
    str(XSD.unsignedByte): GraphQLInt,
    str(XSD.ID): GraphQLID,
}


def graphql_name(local_name: str) -> str:
    name = NAME_RE.sub("_", local_name)
    if not name or name[0].isdigit():
        name = "_" + name
    return name


def _comment(node: Optional[Node]) -> Optional[str]:
    if not node:
        return None
    v = node.first(RDFS_COMMENT)
    return str(v) if v is not None else None


# ---------------- Hierarchy ----------------

def _walk(nodes: Mapping[str, Node], iri: str, step) -> List[str]:
    seen = [iri]
    frontier = [iri]
    while frontier:
        nxt = []
        for c in frontier:
            node = nodes.get(c)
            if node is None:
                continue
            for o in step(node):
                if is_valid_iri(o) and o not in seen:
                    seen.append(o); nxt.append(o)
        frontier = nxt
    return seen


def superclasses(nodes: Mapping[str, Node], iri: str) -> List[str]:
    """``iri`` and its ancestors over rdfs:subClassOf, nearest first."""
    return _walk(nodes, iri, lambda n: n.objects(RDFS_SUBCLASS_OF))


def subclasses(nodes: Mapping[str, Node], iri: str) -> List[str]:
    """``iri`` and its descendants over rdfs:subClassOf, nearest first."""
    return _walk(nodes, iri, lambda n: n.inverse_values(RDFS_SUBCLASS_OF))


def field_properties(nodes: Mapping[str, Node], class_iri: str) -> List[str]:
    props: List[str] = []
    for c in superclasses(nodes, class_iri):
        node = nodes.get(c)
        for p in (node.inverse_values(RDFS_DOMAIN) if node is not None else ()):
            if p not in props:
                props.append(p)
    return props


def field_config_extensions(nodes: Mapping[str, Node], class_iri: str) -> Dict[str, dict]:
    """Extensions of the class and its ancestors; the nearest class wins."""
    merged: Dict[str, dict] = {}
    for c in reversed(superclasses(nodes, class_iri)):
        node = nodes.get(c)
        if node is not None and node.field_config_extensions:
            merged.update(node.field_config_extensions)
    return merged


# ---------------- Fields ----------------

def _is_datatype(g: "SemanticGraph", iri: str) -> bool:
    if iri.startswith(XSD_NS) or iri == RDFS_LITERAL:
        return True
    node = g.nodes.get(iri)
    return node is not None and RDFS_DATATYPE in node.objects(RDF_TYPE)


def property_field(g: "SemanticGraph", property_iri: str) -> GraphQLField:
    node = g.nodes[property_iri]
    if node.field_config is not None:
        return field_from_config(node.field_config, property_iri=property_iri)

    rng = node.first(RDFS_RANGE)
    functional = OWL_FUNCTIONAL_PROPERTY in node.objects(RDF_TYPE)

    if rng is None or not is_valid_iri(rng) or _is_datatype(g, rng) or rng not in g.nodes:
        t = XSD_SCALARS.get(rng, GraphQLString)
        if not functional:
            t = GraphQLList(t)
    elif functional:
        t = g.get_object_type(rng)
    elif g.config.relay:
        t = g.get_connection_type(rng)
    else:
        t = GraphQLList(g.get_object_type(rng))

    return GraphQLField(t, description=_comment(node), extensions={PROPERTY_IRI: property_iri})


def build_field_map(g: "SemanticGraph", class_iri: str) -> GraphQLFieldMap:
    fields: GraphQLFieldMap = {}
    if g.config.relay:
        fields["id"] = GraphQLField(
            GraphQLNonNull(GraphQLID),
            description="The id of the object.",
            resolve=_global_id_resolver(g, class_iri),
        )
    extensions = field_config_extensions(g.nodes, class_iri)
    for p in field_properties(g.nodes, class_iri):
        name = graphql_name(g.get_local_name(p))
        if name in fields:
            continue
        field = property_field(g, p)
        if p in extensions:
            field = merge_field(field, extensions[p])
        fields[name] = field
    return fields


def _global_id_resolver(g: "SemanticGraph", class_iri: str):
    if not g.resolvers.has("resolve_source_id"):
        return None
    to_global_id = require_graphql_relay().to_global_id
    type_name = graphql_name(g.get_local_name(class_iri))
    return lambda source, *args, **kwargs: to_global_id(type_name, g.resolvers.resolve_source_id(source))


# ---------------- Types ----------------

def build_object_type(g: "SemanticGraph", iri: str) -> GraphQLObjectType:
    def interfaces() -> List[GraphQLInterfaceType]:
        out = [g.get_interface_type(c) for c in superclasses(g.nodes, iri)]
        if g.node_interface is not None:
            out.append(g.node_interface)
        return out

    return GraphQLObjectType(
        graphql_name(g.get_local_name(iri)),
        fields=lambda: build_field_map(g, iri),
        interfaces=interfaces,
        description=_comment(g.nodes[iri]),
        extensions={"class_iri": iri},
    )


def build_interface_type(g: "SemanticGraph", iri: str) -> GraphQLInterfaceType:
    return GraphQLInterfaceType(
        graphql_name(g.get_local_name(iri)) + "Interface",
        fields=lambda: build_field_map(g, iri),
        resolve_type=g._resolve_type,
        description=_comment(g.nodes[iri]),
        extensions={"class_iri": iri},
    )


def build_connection_definitions(g: "SemanticGraph", iri: str):
    """Edge and connection types over the object type of ``iri``."""
    node_type = g.get_object_type(iri)
    return require_graphql_relay().connection_definitions(node_type, name=node_type.name)

# semgraph/core/vocabulary.py
"""Base vocabulary (RDF, RDFS, OWL) and rdflib term conversion.

The three ontology documents shipped in ``semgraph/ontologies`` are parsed
once per process on first use and indexed into the seed graph every
``SemanticGraph`` starts from. The seed must be treated as read-only; graph
instances copy a seed node before writing to it (see ``NodeIndex``).
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from rdflib import Graph
from rdflib.namespace import OWL, RDF, RDFS, XSD

from ..errors import FatalStartupError
from .index import NodeIndex, Triple, index_triple, to_value

_log = logging.getLogger(__name__)

ONTOLOGY_DIR = Path(__file__).resolve().parents[1] / "ontologies"
BASE_ONTOLOGIES = ("rdf.ttl", "rdfs.ttl", "owl.ttl")

# lowercase keys follow Turtle convention; capitalized ones are kept as aliases
BASE_PREFIXES = {
    "rdf": str(RDF),
    "rdfs": str(RDFS),
    "owl": str(OWL),
    "xsd": str(XSD),
    "Rdf": str(RDF),
    "Rdfs": str(RDFS),
    "Owl": str(OWL),
}

RDF_TYPE = str(RDF.type)
RDFS_CLASS = str(RDFS.Class)
RDFS_DATATYPE = str(RDFS.Datatype)
RDFS_LITERAL = str(RDFS.Literal)
RDFS_SUBCLASS_OF = str(RDFS.subClassOf)
RDFS_DOMAIN = str(RDFS.domain)
RDFS_RANGE = str(RDFS.range)
RDFS_LABEL = str(RDFS.label)
RDFS_COMMENT = str(RDFS.comment)
OWL_CLASS = str(OWL.Class)
OWL_FUNCTIONAL_PROPERTY = str(OWL.FunctionalProperty)
XSD_NS = str(XSD)


def iter_triples(g: Graph) -> Iterator[Triple]:
    for s, p, o in g:
        yield Triple(to_value(s), to_value(p), to_value(o))


def parse_triples(source=None, *, data=None, format: str = "turtle", base: str | None = None) -> list[Triple]:
    g = Graph()
    if data is not None:
        g.parse(data=data, format=format, publicID=base)
    else:
        g.parse(source, format=format, publicID=base)
    return list(iter_triples(g))


def load_ontology(graph: NodeIndex, path: str | Path) -> int:
    path = Path(path)
    if not path.is_file():
        raise FatalStartupError(f"Missing base vocabulary: {path}")
    try:
        triples = parse_triples(str(path), format="turtle")
    except Exception as e:
        raise FatalStartupError(f"Could not load base vocabulary {path}: {e}") from e
    return sum(1 for t in triples if index_triple(graph, t))


@lru_cache(maxsize=None)
def get_base_graph() -> NodeIndex:
    """Seed graph built from the base ontologies. Loaded once per process."""
    graph = NodeIndex()
    n = 0
    for name in BASE_ONTOLOGIES:
        n += load_ontology(graph, ONTOLOGY_DIR / name)
    _log.info("Loaded base vocabulary: %d triples, %d nodes", n, len(graph))
    return graph

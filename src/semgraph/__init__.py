"""semgraph: RDF triple index seeded with RDF/RDFS/OWL, with ontology-driven type resolution."""
from .config import GraphConfig
from .core.index import Triple
from .core.iri import is_valid_iri
from .errors import (
    ConfigurationError,
    FatalStartupError,
    InvalidArgumentError,
    NotFoundError,
    SemanticGraphError,
)
from .graph import CUSTOM_FIELD_NS, SemanticGraph

__all__ = [
    "CUSTOM_FIELD_NS",
    "ConfigurationError",
    "FatalStartupError",
    "GraphConfig",
    "InvalidArgumentError",
    "NotFoundError",
    "SemanticGraph",
    "SemanticGraphError",
    "Triple",
    "is_valid_iri",
]

# semgraph/core/iri.py
from __future__ import annotations
import re
from rdflib import Literal

# scheme ":" rest, no whitespace or characters that are never legal in an IRI
IRI_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:[^\s<>"{}|\\^`]+$')

def is_valid_iri(value) -> bool:
    """True when ``value`` is an absolute IRI string (literals never are)."""
    if not isinstance(value, str) or isinstance(value, Literal):
        return False
    return IRI_RE.match(value) is not None

def get_iri_local_name(iri: str) -> str:
    for sep in ("#", "/", ":"):
        i = iri.rfind(sep)
        if i >= 0:
            tail = iri[i + 1:]
            return tail if tail else iri
    return iri

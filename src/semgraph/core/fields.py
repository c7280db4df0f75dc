# semgraph/core/fields.py
"""Field configs given as plain mappings -> graphql-core fields.

Keys ``GraphQLField`` understands (type, args, resolve, description,
deprecation_reason) are passed to it; every other key lands in
``field.extensions``. ``type`` is a GraphQL output type or the name of a
built-in scalar (case-insensitive). Fields derived from a property carry its
IRI as ``extensions["property_iri"]``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLOutputType,
    GraphQLString,
    is_output_type,
)

from ..errors import InvalidArgumentError

SCALARS = {t.name.lower(): t for t in (GraphQLString, GraphQLInt, GraphQLFloat, GraphQLBoolean, GraphQLID)}
FIELD_KEYS = ("type", "args", "resolve", "description", "deprecation_reason")
PROPERTY_IRI = "property_iri"


def output_type(value) -> GraphQLOutputType:
    if isinstance(value, str):
        try:
            return SCALARS[value.lower()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown scalar type: {value!r}") from None
    if not is_output_type(value):
        raise InvalidArgumentError(f"Not a GraphQL output type: {value!r}")
    return value


def _split(config) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    if not isinstance(config, Mapping):
        raise InvalidArgumentError(f"Expected a field config mapping, got {type(config).__name__}")
    known, extra = {}, {}
    for k, v in config.items():
        (known if k in FIELD_KEYS else extra)[k] = v
    return known, extra


def field_from_config(config: Mapping[str, Any], property_iri: Optional[str] = None) -> GraphQLField:
    known, extra = _split(config)
    if property_iri is not None:
        extra = {PROPERTY_IRI: property_iri, **extra}
    return GraphQLField(
        output_type(known.get("type", GraphQLString)),
        args=known.get("args"),
        resolve=known.get("resolve"),
        description=known.get("description"),
        deprecation_reason=known.get("deprecation_reason"),
        extensions=extra,
    )


def merge_field(field: GraphQLField, extension: Mapping[str, Any]) -> GraphQLField:
    """New field: ``field`` with the keys of ``extension`` applied on top."""
    known, extra = _split(extension)
    return GraphQLField(
        output_type(known["type"]) if "type" in known else field.type,
        args=known.get("args", field.args),
        resolve=known.get("resolve", field.resolve),
        description=known.get("description", field.description),
        deprecation_reason=known.get("deprecation_reason", field.deprecation_reason),
        extensions={**(field.extensions or {}), **extra},
    )

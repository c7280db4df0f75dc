# semgraph/config.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.iri import is_valid_iri
from .errors import InvalidArgumentError


class GraphConfig(BaseModel):
    """Options recognized by ``SemanticGraph``.

    Unknown keys are kept as extra attributes for downstream builders.
    """

    model_config = ConfigDict(extra="allow")

    prefixes: Dict[str, str] = Field(default_factory=dict)
    relay: bool = False

    @field_validator("prefixes")
    @classmethod
    def _prefixes_are_iris(cls, v: Dict[str, str]) -> Dict[str, str]:
        bad = [k for k, iri in v.items() if not is_valid_iri(iri)]
        if bad:
            raise ValueError(f"prefixes must map to absolute IRIs: {', '.join(bad)}")
        return v

    @classmethod
    def from_value(cls, value) -> "GraphConfig":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value.model_copy(deep=True)
        if not isinstance(value, Mapping):
            raise InvalidArgumentError(f"Expected config to be a mapping, got {type(value).__name__}")
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidArgumentError(str(e)) from e

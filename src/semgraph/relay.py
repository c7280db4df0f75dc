# semgraph/relay.py
"""Optional graphql-relay support.

Only graphs built with ``relay=True`` and the edge/connection lookups need
graphql-relay, so it is imported on first use and reported as a
configuration problem when it is not installed.
"""
from __future__ import annotations

from .errors import ConfigurationError

RELAY_DISTRIBUTION = "graphql-relay"


def require_graphql_relay():
    try:
        import graphql_relay
    except ImportError as e:
        raise ConfigurationError(
            [RELAY_DISTRIBUTION],
            f"Relay support requires {RELAY_DISTRIBUTION}: pip install 'semgraph[relay]'",
        ) from e
    return graphql_relay

# semgraph/core/cache.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

_log = logging.getLogger(__name__)


class TypeCache:
    """Descriptors memoized per (kind, iri) for one graph instance."""

    def __init__(self) -> None:
        self._entries: Dict[Tuple[str, str], Any] = {}
        self.hits = 0
        self.misses = 0

    def get_or_build(self, kind: str, iri: str, factory: Callable[[], Any]) -> Any:
        key = (kind, iri)
        try:
            value = self._entries[key]
        except KeyError:
            self.misses += 1
            _log.debug("type cache miss: %s %s", kind, iri)
            value = self._entries[key] = factory()
            return value
        self.hits += 1
        return value

    def invalidate(self, iri: Optional[str] = None, kind: Optional[str] = None) -> int:
        """Drop entries for ``iri`` (all kinds unless ``kind``), or everything. Returns the count."""
        if iri is None and kind is None:
            n = len(self._entries)
            self._entries.clear()
            return n
        keys = [k for k in self._entries
                if (iri is None or k[1] == iri) and (kind is None or k[0] == kind)]
        for k in keys:
            del self._entries[k]
        return len(keys)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

"""Per-owner memoization of derived values."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazyValueCache:
    """
    Compute-if-absent mapping owned by a single provider instance.

    ``load`` runs the supplier the first time a key is requested and returns
    the stored result afterwards. A supplier that raises stores nothing.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def load(self, key: str, supplier: Callable[[], T]) -> T:
        if key in self._values:
            return self._values[key]

        value = supplier()
        self._values[key] = value
        logger.debug(f"Lazy slot {key} populated")
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def clear(self) -> None:
        self._values.clear()

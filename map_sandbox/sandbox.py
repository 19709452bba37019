# ==============================================
# StringMapSandbox
# ==============================================
#
# PURPOSE:
#   Practice basic associative-container operations (insertion,
#   deletion, sorting, filtering, case transformation) on a single
#   map of strings.
#
# THE MAP:
#   Every entry is stored as  reverse(value) → value
#     add("hola")  →  {"aloh": "hola"}
#   Keys are unique, so adding a value whose reversal is already a key
#   overwrites that entry instead of growing the map.
#
#   The map is only ever used through the MutableMapping interface,
#   so any mapping implementation can be injected (default: dict).
#
# CLASS: StringMapSandbox
# -----------------------
#   Constructor:
#   ------------
#   - __init__(mapping: MutableMapping | None = None,
#              config: SandboxConfig | None = None)
#
#   Queries:
#   --------
#   - values_sorted() -> list[str]          ascending
#   - keys_sorted_descending() -> list[str] descending
#   - first_key() -> str | None             smallest key
#   - last_value() -> str | None            largest value
#   - keys_uppercased() -> set[str]
#   - distinct_value_count() -> int
#   - contains_all_values(candidates) -> bool
#
#   Mutations:
#   ----------
#   - add(value)
#   - remove_by_key(key)
#   - remove_by_value(value)
#   - reset(items)
#   - uppercase_all_keys()
#
#   Inspection:
#   -----------
#   - get_value(key), to_dict(), get_status()
#
# ==============================================

import logging
from typing import Any, Dict, Iterable, Iterator, List, MutableMapping, Optional, Set

from .config import SandboxConfig, get_config
from .text import TextTransformer


logger = logging.getLogger(__name__)


class StringMapSandbox:
    """
    Wraps a map of strings where each key is the reversal of its value.
    """

    def __init__(
        self,
        mapping: Optional[MutableMapping[str, str]] = None,
        config: Optional[SandboxConfig] = None,
    ):
        """
        Initialize the sandbox with an empty map.

        Args:
            mapping: Optional mapping implementation to store entries in.
                     Any existing entries are discarded.
            config: Sandbox configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._strings: MutableMapping[str, str] = mapping if mapping is not None else {}
        self._strings.clear()

    # ======================================
    # Queries
    # ======================================
    def values_sorted(self) -> List[str]:
        """
        Return every value in ascending lexicographic order.

        Returns:
            A new sorted list; repeated values appear once per entry.
        """
        return sorted(self._strings.values())

    def keys_sorted_descending(self) -> List[str]:
        """Return every key in descending lexicographic order."""
        return sorted(self._strings.keys(), reverse=True)

    def first_key(self) -> Optional[str]:
        """
        Return the lexicographically smallest key.

        Returns:
            The smallest key, or None if the map is empty.
        """
        if not self._strings:
            return None
        return min(self._strings.keys())

    def last_value(self) -> Optional[str]:
        """
        Return the lexicographically largest value.

        Returns:
            The largest value, or None if the map is empty.
        """
        if not self._strings:
            return None
        return max(self._strings.values())

    def keys_uppercased(self) -> Set[str]:
        return {TextTransformer.upper(key) for key in self._strings.keys()}

    def distinct_value_count(self) -> int:
        return len(set(self._strings.values()))

    def contains_all_values(self, candidates: Iterable[str]) -> bool:
        """
        Check whether every candidate is stored as a value.

        Args:
            candidates: Strings to look for among the values

        Returns:
            True if all candidates are present (also for no candidates)
        """
        if candidates is None or isinstance(candidates, str):
            raise ValueError("Candidates must be a sequence of strings")

        values = set(self._strings.values())
        return all(candidate in values for candidate in candidates)

    # ======================================
    # Mutations
    # ======================================
    def add(self, value: str) -> None:
        """
        Store a value under its reversed form.

        May leave the size unchanged when the reversed key already exists;
        the old value is then replaced.

        Args:
            value: The string to store
        """
        key = TextTransformer.reverse(value)
        self._strings[key] = value

        if self._config.log_mutations:
            logger.debug("Added %r -> %r (size=%d)", key, value, len(self._strings))

    def remove_by_key(self, key: str) -> None:
        """Remove the entry stored under key, if any."""
        if key not in self._strings:
            return

        removed = self._strings.pop(key)
        if self._config.log_mutations:
            logger.debug("Removed key %r (value %r)", key, removed)

    def remove_by_value(self, value: str) -> None:
        """
        Remove the first entry, in iteration order, holding value.

        Args:
            value: The value to look for
        """
        match = None
        for key, stored in self._strings.items():
            if stored == value:
                match = key
                break

        if match is not None:
            self.remove_by_key(match)

    def reset(self, items: Iterable[Any]) -> None:
        """
        Clear the map and refill it from the string form of each item.

        Items are added in order, so later items overwrite earlier ones
        sharing the same reversed key.

        Args:
            items: Objects of any type; each is converted with str()
        """
        if items is None or isinstance(items, str):
            raise ValueError("Items must be a sequence")

        texts = [TextTransformer.to_text(item) for item in items]

        self._strings.clear()
        for text in texts:
            self.add(text)

        if self._config.log_mutations:
            logger.info("Reset map with %d entries", len(self._strings))

    def uppercase_all_keys(self) -> None:
        """
        Replace every key by its uppercase form, keeping its value.

        When two keys uppercase to the same string only one entry
        survives: the one visited last in iteration order.
        """
        entries = list(self._strings.items())
        self._strings.clear()

        for key, value in entries:
            upper_key = TextTransformer.upper(key)
            if upper_key in self._strings:
                logger.warning(
                    "Key %r collides after uppercasing; dropping value %r",
                    upper_key, self._strings[upper_key]
                )
            self._strings[upper_key] = value

        if self._config.log_mutations:
            logger.info(
                "Uppercased %d keys into %d entries", len(entries), len(self._strings)
            )

    # ======================================
    # Inspection
    # ======================================
    def get_value(self, key: str) -> Optional[str]:
        return self._strings.get(key)

    def to_dict(self) -> Dict[str, str]:
        """
        Return a copy of the current entries.

        Returns:
            Dictionary of key -> value, safe to modify
        """
        return dict(self._strings.items())

    def get_status(self) -> Dict[str, Any]:
        """
        Return a summary of the map.

        Returns:
            Dictionary with size, distinct value count and the
            first key / last value (None when empty)
        """
        return {
            "size": len(self._strings),
            "distinct_values": self.distinct_value_count(),
            "first_key": self.first_key(),
            "last_value": self.last_value(),
        }

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._strings.keys()))

    def __repr__(self) -> str:
        return f"StringMapSandbox({self.to_dict()!r})"

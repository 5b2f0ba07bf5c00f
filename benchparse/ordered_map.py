"""Insertion-ordered string map used for benchmark configuration state.

This module provides ``OrderedMap``, the container every decoded
``BenchmarkResult`` points at for its configuration. Ordering is kept so
that a decoded run can be encoded back to the same text.

Ordering semantics:
    Keys are ordered by **last-write position**, not first-write position.
    Re-assigning an existing key moves it to the end. This mirrors the
    benchmark format rule that a configuration line describes all results
    that follow "until overwritten by a configuration line with the same
    key".

Sharing contract:
    The decoder hands the same ``OrderedMap`` instance to every result
    produced between two configuration lines. Instances reachable from a
    decoded ``Run`` MUST NOT be mutated in place; call :meth:`clone`
    first and mutate the copy.

Thread safety:
    **NOT thread-safe.** Independent instances may be used from different
    threads; a single instance must not be shared across threads without
    external synchronisation.

Example:
    >>> from benchparse.ordered_map import OrderedMap
    >>> config = OrderedMap()
    >>> config.add("commit", "7cd9055")
    >>> config.add("goos", "darwin")
    >>> config.add("commit", "ab322f4")
    >>> config.order
    ['goos', 'commit']
    >>> config.lookup("commit")
    ('ab322f4', True)
"""

from collections.abc import Iterable, Iterator


class OrderedMap:
    """Map of ``str`` keys to ``str`` values with last-write ordering.

    Invariants:
        - ``len(order) == len(contents)``
        - every key in ``order`` appears exactly once
        - ``order`` lists keys in the sequence they were last assigned

    Args:
        pairs: Optional initial ``(key, value)`` pairs, applied in order
            through :meth:`add` (later duplicates win and move to the end).

    Example:
        >>> m = OrderedMap([("a", "1"), ("b", "2")])
        >>> list(m.items())
        [('a', '1'), ('b', '2')]
        >>> m.exists("a", "1")
        True
        >>> m.exists("c", "")
        False
    """

    __slots__ = ("_contents", "_order")

    def __init__(self, pairs: Iterable[tuple[str, str]] | None = None) -> None:
        self._contents: dict[str, str] = {}
        self._order: list[str] = []
        if pairs is not None:
            for key, value in pairs:
                self.add(key, value)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` and move it to the end of the order.

        Args:
            key: Configuration key.
            value: Configuration value. May be empty.
        """
        if key in self._contents:
            self.remove(key)
        self._contents[key] = value
        self._order.append(key)

    def remove(self, key: str) -> None:
        """Remove ``key`` if present. No-op otherwise.

        The relative order of the remaining keys is preserved.

        Args:
            key: Key to remove.
        """
        if key not in self._contents:
            return
        del self._contents[key]
        self._order.remove(key)

    def clone(self) -> "OrderedMap":
        """Return an independent deep copy with the same pairs and order.

        Returns:
            A new :class:`OrderedMap`. Mutating either instance never
            affects the other.
        """
        ret: OrderedMap = OrderedMap()
        ret._contents = dict(self._contents)
        ret._order = list(self._order)
        return ret

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, key: str, value: str) -> bool:
        """Check whether ``key`` is present with exactly ``value``.

        A missing key never exists, even when ``value`` is empty.

        Args:
            key: Key to look for.
            value: Expected value.

        Returns:
            ``True`` if ``key`` is mapped to ``value``.
        """
        return key in self._contents and self._contents[key] == value

    def lookup(self, key: str) -> tuple[str, bool]:
        """Look up a key, distinguishing missing keys from empty values.

        Args:
            key: Key to look up.

        Returns:
            ``(value, True)`` if present, ``("", False)`` otherwise.

        Example:
            >>> m = OrderedMap([("justthekey", "")])
            >>> m.lookup("justthekey")
            ('', True)
            >>> m.lookup("missing")
            ('', False)
        """
        if key in self._contents:
            return self._contents[key], True
        return "", False

    def get(self, key: str, default: str = "") -> str:
        """Return the value for ``key``, or ``default`` when missing.

        Use :meth:`lookup` when an empty value must be told apart from a
        missing key.
        """
        return self._contents.get(key, default)

    def items(self) -> list[tuple[str, str]]:
        """Return ``(key, value)`` pairs in order."""
        return [(key, self._contents[key]) for key in self._order]

    @property
    def contents(self) -> dict[str, str]:
        """Copy of the key → value mapping."""
        return dict(self._contents)

    @property
    def order(self) -> list[str]:
        """Copy of the key order (last-write position)."""
        return list(self._order)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> str:
        return self._contents[key]

    def __contains__(self, key: object) -> bool:
        return key in self._contents

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._order))

    def __bool__(self) -> bool:
        return bool(self._order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrderedMap({self.items()!r})"

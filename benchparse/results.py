"""Result models for decoded benchmark runs.

This module defines the types the decoder produces and the encoder
consumes: :class:`Run`, :class:`BenchmarkResult`, :class:`ValueUnitPair`
and the transient :class:`KeyValue`. All models are Pydantic-based with
``frozen=True``.

Hot-path construction:
    The decoder builds results via ``model_construct()`` to skip Pydantic
    validation for every line of a potentially large report. Regular
    construction (with validation) is safe for tests and for callers
    assembling a :class:`Run` by hand before encoding it.

Configuration sharing:
    ``BenchmarkResult.configuration`` is a **shared reference**. Every
    result decoded between two configuration lines points at the same
    :class:`~benchparse.ordered_map.OrderedMap` instance. Do not mutate it;
    clone it first.

Number formatting:
    Values are rendered with :func:`format_value`: the shortest decimal
    digits that round-trip to the same ``float``, written positionally
    (never in exponent form). ``154125.0`` renders as ``154125`` and
    ``64.88`` as ``64.88``.

Example:
    >>> from benchparse.results import BenchmarkResult, ValueUnitPair
    >>> result = BenchmarkResult(
    ...     name="BenchmarkDecode/text=digits/level=speed/size=1e4-8",
    ...     iterations=100,
    ...     values=(ValueUnitPair(value=154125, unit="ns/op"),),
    ... )
    >>> str(result)
    'BenchmarkDecode/text=digits/level=speed/size=1e4-8 100 154125 ns/op'
    >>> result.all_key_value_pairs().get("size")
    '1e4'
"""

import math
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from benchparse.ordered_map import OrderedMap

# ---------------------------------------------------------------------------
# Well-known units
# ---------------------------------------------------------------------------

UNIT_RUNTIME: str = "ns/op"
"""Unit ``go test -bench`` uses for time per iteration."""

UNIT_BYTES_ALLOCATED: str = "B/op"
"""Unit for bytes allocated per iteration (``-benchmem``)."""

UNIT_OBJECT_ALLOCATIONS: str = "allocs/op"
"""Unit for heap allocations per iteration (``-benchmem``)."""

UNIT_THROUGHPUT: str = "MB/s"
"""Unit for throughput when the benchmark calls ``b.SetBytes``."""

BENCHMARK_PREFIX: str = "Benchmark"
"""Prefix every result line name must start with."""


# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------


def format_value(value: float) -> str:
    """Render a float with the shortest round-trip digits, positionally.

    ``repr()`` already yields the shortest round-trippable digits; this
    re-renders them without an exponent and without a trailing ``.0``.

    Args:
        value: Number to render.

    Returns:
        Text such as ``"154125"``, ``"64.88"``, ``"0.0000001"``,
        ``"+Inf"``, ``"-Inf"`` or ``"NaN"``.

    Example:
        >>> format_value(154125.0)
        '154125'
        >>> format_value(1e-07)
        '0.0000001'
        >>> format_value(float("inf"))
        '+Inf'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text: str = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _strip_parallelism_suffix(value: str) -> str:
    """Drop a trailing ``-<digits>`` suffix (the GOMAXPROCS marker)."""
    head, dash, tail = value.rpartition("-")
    if dash and tail and tail.isascii() and tail.isdigit():
        return head
    return value


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class KeyValue(BaseModel):
    """A single configuration line, split into key and value.

    Attributes:
        key: Configuration key. Starts lowercase, no whitespace or
            uppercase characters.
        value: Configuration value. May be empty, never contains a
            newline.

    Example:
        >>> str(KeyValue(key="commit", value="7cd9055"))
        'commit: 7cd9055'
        >>> str(KeyValue(key="justthekey", value=""))
        'justthekey:'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(description="Configuration key")
    value: str = Field(default="", description="Configuration value")

    def __str__(self) -> str:
        if not self.value:
            return f"{self.key}:"
        return f"{self.key}: {self.value}"


class ValueUnitPair(BaseModel):
    """One measurement of a result line: a number and its unit.

    Attributes:
        value: Measured value.
        unit: Unit string, e.g. ``"ns/op"``. Must not contain whitespace
            for the line to re-encode faithfully.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: float = Field(description="Measured value")
    unit: str = Field(min_length=1, description="Unit, e.g. 'ns/op'")

    def __str__(self) -> str:
        return f"{format_value(self.value)} {self.unit}"


class BenchmarkResult(BaseModel):
    """A single benchmark result line plus the configuration it ran under.

    Attributes:
        name: Benchmark name, e.g. ``"BenchmarkDecode/text=digits-8"``.
        iterations: Number of iterations the benchmark ran.
        values: Measurements in line order. Has at least one member when
            produced by the decoder.
        configuration: Configuration in effect for this result. Shared
            with neighbouring results; ``None`` when built by hand
            without one.

    Example:
        >>> result = BenchmarkResult(
        ...     name="BenchmarkBob",
        ...     iterations=1,
        ...     values=(ValueUnitPair(value=125, unit="ns/op"),),
        ... )
        >>> result.value_by_unit(UNIT_RUNTIME)
        (125.0, True)
        >>> result.base_name()
        'Bob'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    name: str = Field(description="Benchmark name, starts with 'Benchmark'")
    iterations: int = Field(default=0, description="Iterations run")
    values: tuple[ValueUnitPair, ...] = Field(
        default=(),
        description="Value/unit measurements in line order",
    )
    configuration: OrderedMap | None = Field(
        default=None,
        description="Shared configuration snapshot (do not mutate)",
    )

    def base_name(self) -> str:
        """Return the name with the ``Benchmark`` prefix removed.

        Can be empty when the name is exactly ``Benchmark``.
        """
        return self.name.removeprefix(BENCHMARK_PREFIX)

    def value_by_unit(self, unit: str) -> tuple[float, bool]:
        """Return the first value reported in ``unit``.

        Args:
            unit: Unit to search for, e.g. :data:`UNIT_RUNTIME`.

        Returns:
            ``(value, True)`` for the first match, ``(0.0, False)`` if no
            value uses that unit.
        """
        for pair in self.values:
            if pair.unit == unit:
                return pair.value, True
        return 0.0, False

    def name_as_key_value(self) -> OrderedMap:
        """Decompose the slash-separated name into key/value pairs.

        Each ``/`` segment is split on its first ``=``. A segment without
        ``=`` becomes a key with an empty value.

        Returns:
            A new :class:`OrderedMap` in segment order.

        Example:
            >>> r = BenchmarkResult(name="BenchmarkDecode/text=digits/size=1e4-8")
            >>> r.name_as_key_value().items()
            [('BenchmarkDecode', ''), ('text', 'digits'), ('size', '1e4-8')]
        """
        ret: OrderedMap = OrderedMap()
        for segment in self.name.split("/"):
            key, _, value = segment.partition("=")
            ret.add(key, value)
        return ret

    def all_key_value_pairs(self) -> OrderedMap:
        """Combine configuration and name-derived pairs.

        Configuration entries come first, then the name entries (which
        overwrite configuration keys of the same name). The last name
        entry loses a trailing ``-<digits>`` parallelism suffix, so
        ``size=1e4-8`` yields ``1e4``. Values such as ``bob-`` or
        ``bob-3n`` are left untouched.

        Returns:
            A new :class:`OrderedMap`; the shared configuration is not
            modified.
        """
        ret: OrderedMap = (
            self.configuration.clone()
            if self.configuration is not None
            else OrderedMap()
        )
        name_pairs: list[tuple[str, str]] = self.name_as_key_value().items()
        for key, value in name_pairs:
            ret.add(key, value)
        if name_pairs:
            last_key, last_value = name_pairs[-1]
            ret.add(last_key, _strip_parallelism_suffix(last_value))
        return ret

    def __str__(self) -> str:
        fields: list[str] = [self.name, str(self.iterations)]
        fields.extend(str(pair) for pair in self.values)
        return " ".join(fields)


class Run(BaseModel):
    """The full ordered sequence of results decoded from one stream.

    Treat as immutable: results share configuration instances. To edit a
    run, build new results with cloned configurations.

    Attributes:
        results: Decoded results in input order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    results: tuple[BenchmarkResult, ...] = Field(
        default=(),
        description="Results in input order",
    )

"""Line grammars for the Go benchmark text format.

Two stateless recognisers, tried in this order on every input line:

    1. :func:`parse_key_value`: configuration lines, ``key: value``
    2. :func:`parse_result_line`: result lines,
       ``BenchmarkName iterations value unit [value unit ...]``

Format reference:
    https://github.com/golang/proposal/blob/master/design/14313-benchmark-format.md

Failure reporting:
    A line that does not have the *shape* of the grammar raises
    :class:`LineFormatError` carrying a :class:`LineErrorKind`. A result
    line with the right shape but an unparsable number raises a plain
    ``ValueError`` instead. The decoder relies on this split to tell noise
    (always skipped) from damaged results (skipped or fatal depending on
    ``DecoderConfig.strict``).

Example:
    >>> from benchparse.grammar import parse_key_value, parse_result_line
    >>> parse_key_value("commit: 7cd9055").value
    '7cd9055'
    >>> str(parse_result_line("BenchmarkBob       1\\t10\\t  \\t  ns/op"))
    'BenchmarkBob 1 10 ns/op'
"""

import re
from enum import Enum

from benchparse.results import (
    BENCHMARK_PREFIX,
    BenchmarkResult,
    KeyValue,
    ValueUnitPair,
)

# ---------------------------------------------------------------------------
# Failure kinds
# ---------------------------------------------------------------------------


class LineErrorKind(str, Enum):
    """Why a line did not match a grammar.

    Values are the human-readable messages carried by
    :class:`LineFormatError`.
    """

    NO_COLON = "invalid keyvalue: key has no colon"
    EMPTY_KEY = "invalid keyvalue: empty key"
    LOWERCASE_REQUIRED = "invalid keyvalue: expect lowercase start"
    KEY_HAS_SPACES_OR_UPPERCASE = "invalid keyvalue: key has spaces or upper case"
    VALUE_HAS_NEWLINE = "invalid keyvalue: value has newline"
    NOT_ENOUGH_FIELDS = "invalid BenchmarkResult: not enough fields"
    EXPECT_EVEN_FIELDS = "invalid BenchmarkResult: expect even number of fields"
    NO_PREFIX_BENCHMARK = "invalid BenchmarkResult: no prefix benchmark"
    UPPER_AFTER_BENCHMARK_REQUIRED = (
        "invalid BenchmarkResult: no uppercase after benchmark name"
    )


class LineFormatError(ValueError):
    """A line does not have the shape of the grammar being tried.

    Attributes:
        kind: The specific :class:`LineErrorKind`.
    """

    def __init__(self, kind: LineErrorKind) -> None:
        super().__init__(kind.value)
        self.kind: LineErrorKind = kind


# ---------------------------------------------------------------------------
# Numeric fields
# ---------------------------------------------------------------------------

_INTEGER_RE: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
"""Accepted iteration count syntax: optional sign, ASCII digits."""


def _parse_iterations(field: str) -> int:
    if not _INTEGER_RE.fullmatch(field):
        raise ValueError(f"invalid iteration count: {field!r}")
    return int(field)


def _parse_value(field: str) -> float:
    # float() tolerates digit-group underscores; the format does not.
    if "_" in field:
        raise ValueError(f"invalid value: {field!r}")
    try:
        return float(field)
    except ValueError:
        raise ValueError(f"invalid value: {field!r}") from None


# ---------------------------------------------------------------------------
# Grammars
# ---------------------------------------------------------------------------


def parse_key_value(line: str) -> KeyValue:
    """Parse a configuration line of the form ``key: value``.

    The key is everything before the first ``:``, taken literally (not
    trimmed). The value is everything after it with leading spaces and
    tabs removed.

    Args:
        line: One raw input line, without its line terminator.

    Returns:
        The parsed :class:`~benchparse.results.KeyValue`.

    Raises:
        LineFormatError: With kind ``NO_COLON``, ``EMPTY_KEY``,
            ``LOWERCASE_REQUIRED``, ``KEY_HAS_SPACES_OR_UPPERCASE`` or
            ``VALUE_HAS_NEWLINE``, checked in that order.

    Example:
        >>> parse_key_value("akey:           bob").value
        'bob'
        >>> parse_key_value("Akey: bob")
        Traceback (most recent call last):
            ...
        benchparse.grammar.LineFormatError: invalid keyvalue: expect lowercase start
    """
    key, colon, rest = line.partition(":")
    if not colon:
        raise LineFormatError(LineErrorKind.NO_COLON)
    value: str = rest.lstrip(" \t")
    if not key:
        raise LineFormatError(LineErrorKind.EMPTY_KEY)
    if not key[0].islower():
        raise LineFormatError(LineErrorKind.LOWERCASE_REQUIRED)
    if any(ch.isspace() or ch.isupper() for ch in key):
        raise LineFormatError(LineErrorKind.KEY_HAS_SPACES_OR_UPPERCASE)
    if "\n" in value:
        raise LineFormatError(LineErrorKind.VALUE_HAS_NEWLINE)
    return KeyValue.model_construct(key=key, value=value)


def parse_result_line(line: str) -> BenchmarkResult:
    """Parse a benchmark result line.

    Fields are separated by runs of whitespace. The line needs an even
    number of fields, at least four: name, iteration count, then one or
    more value/unit pairs.

    Args:
        line: One input line. Surrounding whitespace is ignored.

    Returns:
        A :class:`~benchparse.results.BenchmarkResult` with
        ``configuration`` left as ``None``.

    Raises:
        LineFormatError: With kind ``NOT_ENOUGH_FIELDS``,
            ``EXPECT_EVEN_FIELDS``, ``NO_PREFIX_BENCHMARK`` or
            ``UPPER_AFTER_BENCHMARK_REQUIRED``, checked in that order.
        ValueError: The line has the right shape but the iteration count
            is not an integer or a value is not a number.

    Example:
        >>> parse_result_line("Benchmark 1 10 ns/op 5 MB/s").values[1].unit
        'MB/s'
        >>> parse_result_line("Benchmarkbob 1 10 ns/op")
        Traceback (most recent call last):
            ...
        benchparse.grammar.LineFormatError: invalid BenchmarkResult: no uppercase after benchmark name
    """
    fields: list[str] = line.split()
    if len(fields) < 4:
        raise LineFormatError(LineErrorKind.NOT_ENOUGH_FIELDS)
    if len(fields) % 2 != 0:
        raise LineFormatError(LineErrorKind.EXPECT_EVEN_FIELDS)
    name: str = fields[0]
    if not name.startswith(BENCHMARK_PREFIX):
        raise LineFormatError(LineErrorKind.NO_PREFIX_BENCHMARK)
    if len(name) > len(BENCHMARK_PREFIX) and not name[len(BENCHMARK_PREFIX)].isupper():
        raise LineFormatError(LineErrorKind.UPPER_AFTER_BENCHMARK_REQUIRED)

    iterations: int = _parse_iterations(fields[1])
    values: list[ValueUnitPair] = []
    for i in range(2, len(fields), 2):
        values.append(
            ValueUnitPair.model_construct(
                value=_parse_value(fields[i]),
                unit=fields[i + 1],
            )
        )
    return BenchmarkResult.model_construct(
        name=name,
        iterations=iterations,
        values=tuple(values),
        configuration=None,
    )

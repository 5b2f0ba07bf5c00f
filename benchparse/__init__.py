"""Decode and re-encode Go benchmark text output.

This package parses the line-oriented format produced by ``go test -bench``
(configuration lines interleaved with result lines), attaches the
configuration in effect to every result, and writes runs back out with the
minimal set of configuration lines. Result models are Pydantic-based with
frozen configuration; configuration snapshots are shared between results
and must be cloned before modification.
"""

from benchparse.decoder import (
    DecodeCancelledError,
    Decoder,
    DecoderConfig,
    DecoderStats,
    ResultValueError,
    decode,
    stream,
)
from benchparse.encoder import Encoder, encode, transition
from benchparse.grammar import (
    LineErrorKind,
    LineFormatError,
    parse_key_value,
    parse_result_line,
)
from benchparse.ordered_map import OrderedMap
from benchparse.results import (
    UNIT_BYTES_ALLOCATED,
    UNIT_OBJECT_ALLOCATIONS,
    UNIT_RUNTIME,
    UNIT_THROUGHPUT,
    BenchmarkResult,
    KeyValue,
    Run,
    ValueUnitPair,
    format_value,
)

__all__: list[str] = [
    "BenchmarkResult",
    "DecodeCancelledError",
    "Decoder",
    "DecoderConfig",
    "DecoderStats",
    "Encoder",
    "KeyValue",
    "LineErrorKind",
    "LineFormatError",
    "OrderedMap",
    "ResultValueError",
    "Run",
    "UNIT_BYTES_ALLOCATED",
    "UNIT_OBJECT_ALLOCATIONS",
    "UNIT_RUNTIME",
    "UNIT_THROUGHPUT",
    "ValueUnitPair",
    "decode",
    "encode",
    "format_value",
    "parse_key_value",
    "parse_result_line",
    "stream",
    "transition",
]

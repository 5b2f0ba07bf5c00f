"""Streaming decoder for Go benchmark text output.

This module provides the ``Decoder`` that turns a text stream into
:class:`~benchparse.results.BenchmarkResult` objects. It classifies each
line (configuration line, result line, or noise), keeps the configuration
in effect as an :class:`~benchparse.ordered_map.OrderedMap`, and hands
every result to a callback as soon as its line is read.

Copy-on-write sharing:
    The current configuration is attached to each result **by reference**.
    All results between two configuration lines therefore share one
    ``OrderedMap`` instance, so O(1) extra memory per result instead of
    O(config size). After a result has been handed out the map is marked
    dirty; the next configuration line clones it before mutating, so
    results already delivered never observe later changes.

Noise policy:
    Lines matching neither grammar (banners, blank lines, ``PASS``,
    ``ok  pkg 1.2s``) are dropped silently. Result-shaped lines with a
    non-numeric iteration count or value are dropped too unless
    ``DecoderConfig.strict`` is set, in which case they abort the decode
    with :class:`ResultValueError`.

Cancellation:
    ``stream()`` accepts an optional ``threading.Event``. It is checked
    once after every line; when set, :class:`DecodeCancelledError` is
    raised. Results already passed to the callback stay delivered.

Thread safety:
    **NOT thread-safe.** A ``Decoder`` holds counters; use one instance
    per thread. Independent instances may decode in parallel.

Logging safety:
    Discarded lines are logged at DEBUG with rate limiting: the first 10
    in full, then every 1000th.

Example:
    >>> import io
    >>> from benchparse.decoder import Decoder
    >>> run = Decoder().decode(io.StringIO(
    ...     "commit: 7cd9055\\n"
    ...     "BenchmarkDecode-8 100 154125 ns/op\\n"
    ...     "BenchmarkEncode-8 100 94125 ns/op\\n"
    ... ))
    >>> len(run.results)
    2
    >>> run.results[0].configuration is run.results[1].configuration
    True
"""

import logging
import threading
from collections.abc import Iterable
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from benchparse.grammar import LineFormatError, parse_key_value, parse_result_line
from benchparse.ordered_map import OrderedMap
from benchparse.results import BenchmarkResult, KeyValue, Run

logger: logging.Logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

ResultCallback = Callable[[BenchmarkResult], None]
"""Callback signature for streamed results: ``(result) -> None``."""

# ---------------------------------------------------------------------------
# Rate-limited logging thresholds
# ---------------------------------------------------------------------------

_LOG_FIRST_N: int = 10
"""Log every discarded line for the first N discards."""

_LOG_EVERY_N: int = 1000
"""After the first N discards, log every Nth occurrence."""


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class DecodeCancelledError(Exception):
    """The cancellation event was set while a stream was being decoded.

    Attributes:
        lines_read: Lines consumed before cancellation was noticed.
    """

    def __init__(self, lines_read: int) -> None:
        super().__init__(f"decode cancelled after {lines_read} line(s)")
        self.lines_read: int = lines_read


class ResultValueError(ValueError):
    """A result-shaped line carried an invalid number (strict mode only).

    Raised from the underlying ``ValueError`` (available as
    ``__cause__``).

    Attributes:
        line_number: 1-based line number in the input stream.
        line: The offending line, without its terminator.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number: int = line_number
        self.line: str = line


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class DecoderConfig(BaseModel):
    """Configuration for :class:`Decoder`.

    Attributes:
        strict: If ``True``, a line shaped like a result line whose
            iteration count or values fail to parse aborts the decode
            with :class:`ResultValueError`. If ``False`` (default), such
            lines are discarded like any other noise.

    Example:
        >>> DecoderConfig().strict
        False
        >>> DecoderConfig(strict=True).strict
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = Field(
        default=False,
        description=(
            "Raise on result-shaped lines with invalid numbers instead of "
            "discarding them."
        ),
    )


# ---------------------------------------------------------------------------
# Stats Model
# ---------------------------------------------------------------------------


class DecoderStats(BaseModel):
    """Immutable snapshot of decoder counters.

    Returned by :meth:`Decoder.stats`. Counters are cumulative across
    every ``stream()``/``decode()`` call on one decoder until
    :meth:`Decoder.reset_stats`.

    Invariant:
        ``lines_read == config_lines + results + skipped_lines`` whenever
        no decode is in progress and none was aborted mid-line.

    Attributes:
        lines_read: Lines consumed from input streams.
        config_lines: Lines classified as configuration lines.
        results: Result lines delivered to callbacks.
        skipped_lines: Lines discarded (noise and, in non-strict mode,
            result lines with invalid numbers).
        value_errors: Result-shaped lines with invalid numbers, whether
            discarded or raised.
        config_clones: Copy-on-write clones of the current configuration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lines_read: int = Field(ge=0, description="Lines consumed")
    config_lines: int = Field(ge=0, description="Configuration lines applied")
    results: int = Field(ge=0, description="Results delivered")
    skipped_lines: int = Field(ge=0, description="Lines discarded")
    value_errors: int = Field(
        ge=0,
        description="Result-shaped lines with invalid numbers",
    )
    config_clones: int = Field(
        ge=0,
        description="Copy-on-write clones of the configuration",
    )


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class Decoder:
    """Decode Go benchmark text into results with shared configuration.

    Args:
        config: Decoder configuration. Defaults to ``DecoderConfig()``
            (non-strict).

    Example:
        >>> seen = []
        >>> Decoder().stream(
        ...     ["BenchmarkDecode 100 154125 ns/op", "PASS"],
        ...     on_result=lambda r: seen.append(r.name),
        ... )
        >>> seen
        ['BenchmarkDecode']
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config: DecoderConfig = config or DecoderConfig()

        self._lines_read: int = 0
        self._config_lines: int = 0
        self._results: int = 0
        self._skipped_lines: int = 0
        self._value_errors: int = 0
        self._config_clones: int = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def stream(
        self,
        source: Iterable[str],
        on_result: ResultCallback,
        cancel: threading.Event | None = None,
    ) -> None:
        """Decode ``source`` line by line, calling ``on_result`` per result.

        Args:
            source: Iterable of text lines, e.g. an open text file or
                ``io.StringIO``. Trailing ``\\n`` / ``\\r\\n`` are removed.
            on_result: Called with each result, in input order, as soon
                as its line is decoded.
            cancel: Optional event checked after every line.

        Raises:
            DecodeCancelledError: ``cancel`` was set.
            ResultValueError: Strict mode and a result-shaped line had an
                invalid number.
            OSError: Reading ``source`` failed. Propagated unchanged.
        """
        current: OrderedMap = OrderedMap()
        dirty: bool = False
        line_number: int = 0
        delivered: int = 0

        for raw in source:
            line_number += 1
            self._lines_read += 1
            line: str = raw.rstrip("\n").removesuffix("\r")

            kv: KeyValue | None = self._try_key_value(line)
            if kv is not None:
                if dirty:
                    current = current.clone()
                    dirty = False
                    self._config_clones += 1
                current.add(kv.key, kv.value)
                self._config_lines += 1
            else:
                result: BenchmarkResult | None = self._try_result(
                    line=line,
                    line_number=line_number,
                )
                if result is not None:
                    result = result.model_copy(update={"configuration": current})
                    dirty = True
                    self._results += 1
                    delivered += 1
                    on_result(result)

            if cancel is not None and cancel.is_set():
                logger.warning(
                    "Decode cancelled after %d line(s), %d result(s) delivered",
                    line_number,
                    delivered,
                )
                raise DecodeCancelledError(lines_read=line_number)

        logger.info(
            "Decoded %d line(s) into %d result(s)",
            line_number,
            delivered,
        )

    def decode(self, source: Iterable[str]) -> Run:
        """Decode an entire stream into a :class:`~benchparse.results.Run`.

        The returned run shares ``OrderedMap`` instances between results
        and is **not** intended to be modified.

        Args:
            source: Iterable of text lines.

        Returns:
            All decoded results, in input order.

        Raises:
            ResultValueError: Strict mode only.
            OSError: Reading ``source`` failed.
        """
        results: list[BenchmarkResult] = []
        self.stream(source, on_result=results.append)
        return Run.model_construct(results=tuple(results))

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    def stats(self) -> DecoderStats:
        """Return a snapshot of the decoder counters.

        Returns:
            Frozen :class:`DecoderStats`.
        """
        return DecoderStats(
            lines_read=self._lines_read,
            config_lines=self._config_lines,
            results=self._results,
            skipped_lines=self._skipped_lines,
            value_errors=self._value_errors,
            config_clones=self._config_clones,
        )

    def reset_stats(self) -> None:
        """Zero all counters."""
        self._lines_read = 0
        self._config_lines = 0
        self._results = 0
        self._skipped_lines = 0
        self._value_errors = 0
        self._config_clones = 0

    # ------------------------------------------------------------------
    # Line classification
    # ------------------------------------------------------------------

    @staticmethod
    def _try_key_value(line: str) -> KeyValue | None:
        try:
            return parse_key_value(line)
        except LineFormatError:
            return None

    def _try_result(self, line: str, line_number: int) -> BenchmarkResult | None:
        """Parse a result line, applying the noise and strictness policy."""
        try:
            return parse_result_line(line)
        except LineFormatError as exc:
            self._skip(line=line, line_number=line_number, reason=str(exc))
            return None
        except ValueError as exc:
            self._value_errors += 1
            if self._config.strict:
                raise ResultValueError(
                    line_number=line_number,
                    line=line,
                    reason=str(exc),
                ) from exc
            self._skip(line=line, line_number=line_number, reason=str(exc))
            return None

    def _skip(self, line: str, line_number: int, reason: str) -> None:
        """Count a discarded line and log it with rate limiting."""
        self._skipped_lines += 1
        count: int = self._skipped_lines
        if count <= _LOG_FIRST_N:
            logger.debug(
                "Skipping line %d (%s): %r",
                line_number,
                reason,
                line,
            )
        elif count % _LOG_EVERY_N == 0:
            logger.debug("Skipped lines ongoing: %d total", count)


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------


def decode(source: Iterable[str], config: DecoderConfig | None = None) -> Run:
    """Decode ``source`` with a fresh :class:`Decoder`."""
    return Decoder(config=config).decode(source)


def stream(
    source: Iterable[str],
    on_result: ResultCallback,
    cancel: threading.Event | None = None,
    config: DecoderConfig | None = None,
) -> None:
    """Stream ``source`` through a fresh :class:`Decoder`."""
    Decoder(config=config).stream(source, on_result=on_result, cancel=cancel)

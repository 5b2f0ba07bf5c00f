"""Diff-based encoder writing runs back to Go benchmark text.

For each result the encoder writes only the configuration lines that
changed since the previous result, then the result line itself. Because
the decoder shares one ``OrderedMap`` between results that had no
configuration line in between, the common case is an identity check and
no configuration output at all.

Round-trip guarantee:
    ``encode(decode(text)) == text`` whenever ``text`` is already
    canonically spaced (single spaces between result fields, ``key: value``
    configuration lines, no trailing whitespace, no noise lines, and no
    configuration line that restates an unchanged value). Arbitrary
    whitespace and tab layouts are normalised, not reproduced.

Example:
    >>> from benchparse.encoder import Encoder
    >>> from benchparse.results import BenchmarkResult, Run, ValueUnitPair
    >>> run = Run(results=(
    ...     BenchmarkResult(
    ...         name="BenchmarkBob",
    ...         iterations=1,
    ...         values=(ValueUnitPair(value=345, unit="ns/op"),),
    ...     ),
    ... ))
    >>> Encoder().encode_to_string(run)
    'BenchmarkBob 1 345 ns/op\\n'
"""

import io
import logging
from typing import Protocol

from benchparse.ordered_map import OrderedMap
from benchparse.results import KeyValue, Run

logger: logging.Logger = logging.getLogger(__name__)


class TextWriter(Protocol):
    """Anything with a ``write(str)`` method (text files, ``io.StringIO``)."""

    def write(self, text: str, /) -> object: ...


def transition(
    previous: OrderedMap | None,
    current: OrderedMap | None,
) -> OrderedMap:
    """Return the configuration lines needed to move from one state to the next.

    Rules, in order:
        - same instance → nothing
        - ``previous`` missing or empty → all of ``current``
        - ``current`` missing → all of ``previous``
        - otherwise → each pair of ``current`` (in its order) that does
          not already exist in ``previous``

    Keys present in ``previous`` but absent from ``current`` cannot be
    expressed in the format and are not reported.

    Args:
        previous: Configuration of the last encoded result.
        current: Configuration of the result about to be encoded.

    Returns:
        A new :class:`OrderedMap`, or ``current``/``previous`` itself for
        the full-copy cases. Callers must not mutate the return value.

    Example:
        >>> old = OrderedMap([("commit", "a"), ("goos", "linux")])
        >>> new = OrderedMap([("commit", "b"), ("goos", "linux")])
        >>> transition(old, new).items()
        [('commit', 'b')]
    """
    if previous is current:
        return OrderedMap()
    if previous is None or not previous:
        return current if current is not None else OrderedMap()
    if current is None:
        return previous
    ret: OrderedMap = OrderedMap()
    for key, value in current.items():
        if not previous.exists(key, value):
            ret.add(key, value)
    return ret


class Encoder:
    """Write a :class:`~benchparse.results.Run` as benchmark text.

    Stateless; one instance may be reused for any number of runs.
    """

    def encode(self, w: TextWriter, run: Run) -> None:
        """Write ``run`` to ``w``.

        Args:
            w: Destination with a ``write(str)`` method.
            run: Run to encode. An empty run writes nothing.

        Raises:
            OSError: Writing to ``w`` failed. Propagated unchanged.
        """
        previous: OrderedMap | None = None
        config_lines: int = 0
        for result in run.results:
            for key, value in transition(previous, result.configuration).items():
                w.write(f"{KeyValue.model_construct(key=key, value=value)}\n")
                config_lines += 1
            previous = result.configuration
            w.write(f"{result}\n")
        logger.debug(
            "Encoded %d result(s) with %d configuration line(s)",
            len(run.results),
            config_lines,
        )

    def encode_to_string(self, run: Run) -> str:
        """Encode ``run`` and return the text."""
        buf: io.StringIO = io.StringIO()
        self.encode(buf, run)
        return buf.getvalue()


def encode(w: TextWriter, run: Run) -> None:
    """Write ``run`` to ``w`` with a default :class:`Encoder`."""
    Encoder().encode(w, run)

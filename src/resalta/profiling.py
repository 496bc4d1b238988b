"""Resalta ScanAccumulator — opt-in profiling for lexing.

This module provides accumulated metrics while scanning:
- Total scan time
- Source length
- Tokens produced, and how many were single-character fallbacks

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from resalta import highlight
    from resalta.profiling import profiled_scan

    # Normal scan (no overhead)
    tokens = highlight(language, "var i = 0;")

    # Profiled scan (opt-in)
    with profiled_scan() as metrics:
        tokens = highlight(language, "var i = 0;")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 10, "token_count": 8, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during lexing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total characters scanned.
        token_count: Total tokens produced.
        fallback_count: Tokens produced because no pattern matched.
        scan_calls: Number of lex() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    fallback_count: int = 0
    scan_calls: int = 0

    def record_scan(self, source_length: int, token_count: int, fallback_count: int) -> None:
        """Record a lex() call.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of tokens in the result.
            fallback_count: Number of unmatched characters.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.fallback_count += fallback_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, source_length, token_count, fallback_count, scan_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "fallback_count": self.fallback_count,
            "scan_calls": self.scan_calls,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during lex() calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)

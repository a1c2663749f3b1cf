"""Run every registered codec over a document and rank the results."""

import time
from dataclasses import dataclass

import click

from compress_bench.compressors import CodecRegistry
from compress_bench.errors import CodecError


@dataclass(frozen=True)
class BenchmarkResult:
    """Size of one codec's output, measured against the original input."""

    name: str
    original_size: int
    compressed_size: int
    saving_percent: float

    def __repr__(self) -> str:
        return (
            f"{self.name:10s}: "
            f"{self.original_size:,} -> {self.compressed_size:,} bytes "
            f"({self.saving_percent:.2f}%)"
        )


def saving_percent(original_size: int, compressed_size: int) -> float:
    """
    Percentage of ``original_size`` saved by shrinking it to ``compressed_size``.

    Negative when the output is larger. An empty original has nothing to
    save, so it reports 0.0.
    """
    if original_size == 0:
        return 0.0
    return (original_size - compressed_size) / original_size * 100.0


def run(
    original: bytes,
    preprocessed: bytes,
    registry: CodecRegistry,
    verbose: bool = False,
) -> list[BenchmarkResult]:
    """
    Compress ``preprocessed`` with every codec in ``registry``.

    Savings are computed against ``len(original)``, so they include whatever
    the preprocessing step already removed.

    Args:
        original: The input as read, before minification
        preprocessed: The bytes the codecs are applied to
        registry: Codecs to run, in order
        verbose: Print per-codec sizes and timings to stderr

    Returns:
        Results sorted by saving, highest first. Equal savings keep registry order.

    Raises:
        CodecError: If any codec fails. No results are returned in that case.
    """
    original_size = len(original)
    data = bytes(preprocessed)

    results = []
    for codec in registry:
        start = time.perf_counter() if verbose else None
        try:
            output = codec.transform(data)
        except Exception as e:
            raise CodecError(codec.name, e) from e

        result = BenchmarkResult(
            name=codec.name,
            original_size=original_size,
            compressed_size=len(output),
            saving_percent=saving_percent(original_size, len(output)),
        )
        results.append(result)
        if verbose:
            elapsed_ms = (time.perf_counter() - start) * 1000
            click.echo(f"  {result} in {elapsed_ms:.2f}ms", err=True)

    # sorted() is stable: ties stay in registry order
    return sorted(results, key=lambda r: r.saving_percent, reverse=True)

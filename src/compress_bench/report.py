"""Render benchmark results as a text table or JSON."""

from dataclasses import asdict

import orjson

from compress_bench.benchmarks import BenchmarkResult

HEADERS = ("Algorithm", "Original Size (bytes)", "Compressed Size (bytes)", "Saving (%)")
PADDING = 3


def format_table(results: list[BenchmarkResult], padding: int = PADDING) -> str:
    """
    Right-aligned table, one row per result, in the order given.

    Every column is as wide as its widest cell plus ``padding`` spaces.
    """
    rows = [HEADERS, tuple("-" * len(h) for h in HEADERS)]
    for r in results:
        rows.append((
            r.name,
            str(r.original_size),
            str(r.compressed_size),
            f"{r.saving_percent:.2f}%",
        ))

    widths = [max(len(row[i]) for row in rows) + padding for i in range(len(HEADERS))]
    lines = ["".join(cell.rjust(w) for cell, w in zip(row, widths)) for row in rows]
    return "\n".join(lines)


def format_report(original_size: int, results: list[BenchmarkResult]) -> str:
    return f"Original Size: {original_size} bytes\n{format_table(results)}"


def format_json(original_size: int, results: list[BenchmarkResult]) -> str:
    payload = {
        "original_size": original_size,
        "results": [asdict(r) for r in results],
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")

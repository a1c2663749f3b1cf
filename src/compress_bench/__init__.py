"""Compression codec benchmarking harness."""

from compress_bench.benchmarks import BenchmarkResult, run, saving_percent
from compress_bench.compressors import Codec, CodecRegistry, default_registry
from compress_bench.errors import (
    ArgumentError,
    BenchError,
    CodecError,
    InputError,
    PreprocessError,
)
from compress_bench.minify import minify_json

__version__ = "0.1.0"
__all__ = [
    "ArgumentError",
    "BenchError",
    "BenchmarkResult",
    "Codec",
    "CodecError",
    "CodecRegistry",
    "InputError",
    "PreprocessError",
    "default_registry",
    "minify_json",
    "run",
    "saving_percent",
]

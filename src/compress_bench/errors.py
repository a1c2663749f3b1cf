"""Errors raised while benchmarking a file."""


class BenchError(Exception):
    """Base class for every fatal benchmark failure."""

    stage = "benchmark"

    def __str__(self) -> str:
        return f"{self.stage}: {super().__str__()}"


class ArgumentError(BenchError, ValueError):
    """An option value out of range, e.g. an unsupported compression level."""

    stage = "arguments"


class InputError(BenchError):
    stage = "read"


class PreprocessError(BenchError):
    stage = "minify"


class CodecError(BenchError):
    """A compressor failed; carries the name of the codec that raised."""

    stage = "compress"

    def __init__(self, codec_name: str, cause: BaseException):
        super().__init__(f"{codec_name} failed: {cause}")
        self.codec_name = codec_name
        self.cause = cause

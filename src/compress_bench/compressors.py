"""Compression codecs and the registry the benchmark runs over."""

import bz2
import gzip
import lzma
import zlib
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

import imagecodecs
import zstandard as zstd

from compress_bench.errors import ArgumentError

DEFAULT_LEVEL = 6
DEFAULT_ZSTD_LEVEL = 3

DEFLATE_LEVELS = range(0, 10)
ZSTD_LEVELS = range(-100, 23)


@dataclass(frozen=True)
class Codec:
    """A named byte transformation. ``decode`` reverses ``transform`` when known."""

    name: str
    transform: Callable[[bytes], bytes]
    decode: Callable[[bytes], bytes] | None = None


class CodecRegistry:
    """
    Ordered, immutable collection of codecs.

    Registry order is the order codecs run in and the tie-break order of the
    ranked results.
    """

    def __init__(self, codecs: Iterable[Codec] = ()):
        codecs = tuple(codecs)
        seen = set()
        for codec in codecs:
            if codec.name in seen:
                raise ValueError(f"Duplicate codec name: {codec.name}")
            seen.add(codec.name)
        self._codecs = codecs

    def __iter__(self) -> Iterator[Codec]:
        return iter(self._codecs)

    def __len__(self) -> int:
        return len(self._codecs)

    def __repr__(self) -> str:
        return f"CodecRegistry({', '.join(self.names())})"

    def names(self) -> list[str]:
        return [codec.name for codec in self._codecs]

    def get(self, name: str) -> Codec:
        for codec in self._codecs:
            if codec.name == name:
                return codec
        raise KeyError(name)

    def with_codec(self, codec: Codec) -> "CodecRegistry":
        """Return a new registry with ``codec`` appended."""
        return CodecRegistry((*self._codecs, codec))


def identity(data: bytes) -> bytes:
    return data


def gzip_compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    # mtime=0 keeps the header, and so the output, deterministic
    return gzip.compress(data, compresslevel=level, mtime=0)


def zlib_compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    return zlib.compress(data, level)


def flate_compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    """Raw DEFLATE stream with no zlib or gzip envelope."""
    compressor = zlib.compressobj(level, zlib.DEFLATED, -zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def flate_decompress(data: bytes) -> bytes:
    return zlib.decompress(data, -zlib.MAX_WBITS)


def lzw_compress(data: bytes) -> bytes:
    return imagecodecs.lzw_encode(data)


def lzw_decompress(data: bytes) -> bytes:
    return imagecodecs.lzw_decode(data)


def zstd_compress(data: bytes, level: int = DEFAULT_ZSTD_LEVEL) -> bytes:
    cctx = zstd.ZstdCompressor(level=level)
    return cctx.compress(data)


def zstd_decompress(data: bytes) -> bytes:
    # decompressobj does not need the content size in the frame header
    return zstd.ZstdDecompressor().decompressobj().decompress(data)


def bzip2_compress(data: bytes) -> bytes:
    return bz2.compress(data)


def lzma_compress(data: bytes) -> bytes:
    return lzma.compress(data, format=lzma.FORMAT_XZ)


def default_registry(
    level: int = DEFAULT_LEVEL,
    zstd_level: int = DEFAULT_ZSTD_LEVEL,
) -> CodecRegistry:
    """
    Build the standard set of codecs.

    Args:
        level: Compression level for the DEFLATE family (Gzip, Zlib, Flate), 0 to 9
        zstd_level: Compression level for Zstd, -100 to 22

    Returns:
        CodecRegistry starting with the Identity baseline
    """
    if level not in DEFLATE_LEVELS:
        raise ArgumentError(f"DEFLATE level must be between 0 and 9, got {level}")
    if zstd_level not in ZSTD_LEVELS:
        raise ArgumentError(f"Zstd level must be between -100 and 22, got {zstd_level}")

    return CodecRegistry([
        Codec("Identity", identity, identity),
        Codec("Gzip", lambda data: gzip_compress(data, level), gzip.decompress),
        Codec("Zlib", lambda data: zlib_compress(data, level), zlib.decompress),
        Codec("Flate", lambda data: flate_compress(data, level), flate_decompress),
        Codec("LZW", lzw_compress, lzw_decompress),
        Codec("Zstd", lambda data: zstd_compress(data, zstd_level), zstd_decompress),
        Codec("Bzip2", bzip2_compress, bz2.decompress),
        Codec("LZMA", lzma_compress, lzma.decompress),
    ])

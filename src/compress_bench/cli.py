"""Command-line interface for compress-bench."""

from pathlib import Path

import click

from compress_bench.benchmarks import run
from compress_bench.compressors import DEFAULT_LEVEL, DEFAULT_ZSTD_LEVEL, default_registry
from compress_bench.errors import ArgumentError, BenchError, InputError
from compress_bench.minify import minify_json
from compress_bench.report import format_json, format_report


def read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise InputError(f"Failed to read file '{path}': {e}") from e


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option('--level', '-l', default=DEFAULT_LEVEL, help='DEFLATE compression level for Gzip, Zlib and Flate (0 to 9)', show_default=True)
@click.option('--zstd-level', default=DEFAULT_ZSTD_LEVEL, help='Zstd compression level (-100 to 22)', show_default=True)
@click.option('--no-minify', is_flag=True, help='Compress the file as-is instead of minifying it as JSON first')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table', help='Output format', show_default=True)
@click.option('--verbose', '-v', is_flag=True, help='Print per-codec sizes and timings to stderr')
def main(path, level, zstd_level, no_minify, output_format, verbose):
    """Compress PATH with every codec and rank them by size saving."""
    try:
        registry = default_registry(level=level, zstd_level=zstd_level)
    except ArgumentError as e:
        raise click.BadParameter(str(e)) from e

    try:
        original = read_input(path)
        if verbose:
            click.echo(f"Read {len(original):,} bytes from {path}", err=True)

        preprocessed = original if no_minify else minify_json(original)
        if verbose and not no_minify:
            click.echo(f"Minified to {len(preprocessed):,} bytes", err=True)
        if verbose:
            click.echo(f"Running {len(registry)} codecs...", err=True)

        results = run(original, preprocessed, registry, verbose=verbose)
    except BenchError as e:
        raise click.ClickException(str(e)) from e

    if output_format == 'json':
        click.echo(format_json(len(original), results))
    else:
        click.echo(format_report(len(original), results))


if __name__ == "__main__":
    main()

"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from rstpub.config import Settings, load_config
from rstpub.core.export import to_json
from rstpub.core.parse import DocumentParser
from rstpub.core.pipeline import parse_file, run_build


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _parser(directives: list[str]) -> DocumentParser:
    try:
        return DocumentParser(directives)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    debug: Annotated[bool, typer.Option("--debug", help="Log parser and pipeline detail to stderr")] = False,
    ):
    """Parse restructured-text content with snippet-card directives into JSON."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )


def parse_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help=".rst file to parse")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write JSON here instead of stdout")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indent; 0 = compact")] = None,
    directive: Annotated[Optional[list[str]], typer.Option("--directive", "-d", help="Enable a directive kind (repeatable)")] = None,
    ):
    """Parse a single document and emit its JSON form."""
    settings = _settings(overrides={"json_indent": indent, "directives": directive or None})
    parser = _parser(settings.directives)
    try:
        doc = parse_file(path, parser)
    except RuntimeError as e:
        _fail(str(e))

    text = to_json(doc, indent=settings.json_indent or None)
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"  {path} -> {out}")


def build_cmd(
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Content root directory")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    chunk_size: Annotated[Optional[int], typer.Option("--chunk-size", help="Max items per chunk file")] = None,
    directive: Annotated[Optional[list[str]], typer.Option("--directive", "-d", help="Enable a directive kind (repeatable)")] = None,
    ):
    """Parse all content types, embed snippets in posts, and write JSON indexes."""
    settings = _settings(overrides={
        "content_dir": content, "output_dir": out,
        "chunk_size": chunk_size, "directives": directive or None,
    })
    parser = _parser(settings.directives)
    content_dir = Path(settings.content_dir)
    output_dir = Path(settings.output_dir)
    if not content_dir.is_dir():
        _fail(f"Content directory not found: {content_dir}")

    try:
        counts = run_build(
            content_dir, output_dir, settings.content_types,
            settings.chunk_size, parser, settings.json_indent or None,
        )
    except (RuntimeError, OSError) as e:
        _fail("Build failed", e)

    for content_type, count in counts.items():
        typer.echo(f"  {content_type}: {count} item(s)")
    typer.echo(f"Built {sum(counts.values())} item(s) into {output_dir}/")

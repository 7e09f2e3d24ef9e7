"""Pipeline step functions: file discovery, parsing, snippet resolution, and export"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from rstpub.core.export import build_item, write_indexes, write_type_index
from rstpub.core.models import ParsedDocument
from rstpub.core.parse import DocumentParser
from rstpub.core.resolve import SnippetCatalog, resolve


logger = logging.getLogger(__name__)

RST_EXTENSIONS = {'.rst'}
SNIPPETS_TYPE = 'snippets'
RESOLVED_TYPES = {'posts'}          # content types whose snippet refs are embedded


def discover_files(path: Path) -> list[Path]:
    """Return sorted .rst files directly under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in RST_EXTENSIONS else []
    if not path.is_dir():
        return []
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix in RST_EXTENSIONS)


def parse_file(path: Path, parser: Optional[DocumentParser] = None) -> ParsedDocument:
    """Read a UTF-8 file and parse it; read failures raise RuntimeError."""
    try:
        raw = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e
    return (parser or DocumentParser()).parse(raw)


def parse_dir(path: Path, parser: Optional[DocumentParser] = None) -> dict[str, ParsedDocument]:
    """Parse every .rst file under path, keyed by file stem."""
    docs = {}
    for p in discover_files(path):
        docs[p.stem] = parse_file(p, parser)
        logger.debug("Parsed %s", p)
    return docs


def run_build(
    content_dir: Path,
    output_dir: Path,
    content_types: Sequence[str] = ('posts', 'snippets', 'projects'),
    chunk_size: int = 1000,
    parser: Optional[DocumentParser] = None,
    indent: Optional[int] = 2,
    ) -> dict[str, int]:
    """Parse each content type under content_dir and write all indexes to output_dir.

    Snippets are parsed first so that posts can embed the snippets they
    reference. Returns {content_type: item_count}.
    """
    parser = parser or DocumentParser()
    output_dir.mkdir(parents=True, exist_ok=True)

    snippets = parse_dir(content_dir / SNIPPETS_TYPE, parser)
    catalog = SnippetCatalog.from_documents(snippets)
    logger.info("Loaded %d snippet(s)", len(catalog))

    items_by_type: dict[str, list[dict]] = {}
    for content_type in content_types:
        if content_type == SNIPPETS_TYPE:
            docs = snippets
        else:
            docs = parse_dir(content_dir / content_type, parser)
        items = []
        for slug, doc in docs.items():
            if content_type in RESOLVED_TYPES:
                doc = resolve(doc, catalog)
            items.append(build_item(slug, doc))
        write_type_index(items, output_dir, content_type, chunk_size, indent)
        items_by_type[content_type] = items
        logger.info("Processed %d %s", len(items), content_type)

    write_indexes(items_by_type, output_dir, indent)
    return {content_type: len(items) for content_type, items in items_by_type.items()}

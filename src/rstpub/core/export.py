"""Export: JSON wire format, per-type indexes and chunks, tag and search indexes"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from rstpub.core.models import ParsedDocument, ResolvedDocument


CHUNKS_DIR = "content-chunks"
TAGS_FILE = "tags.json"
SEARCH_FILE = "search-index.json"
HTML_TAG_RE = re.compile(r"<[^>]*>")

Document = Union[ParsedDocument, ResolvedDocument]


def to_dict(doc: Document) -> dict[str, Any]:
    """Return the exchange-format dict: frontmatter, content, snippet_refs."""
    return doc.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(doc: Document, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(doc), indent=indent, ensure_ascii=False)


def build_item(slug: str, doc: Document) -> dict[str, Any]:
    """Index entry for a document: its wire dict prefixed with an id."""
    return {"id": slug, **to_dict(doc)}


def _write_json(path: Path, data: Any, indent: Optional[int]) -> None:
    path.write_text(json.dumps(data, indent=indent, ensure_ascii=False), encoding="utf-8")


def write_type_index(
    items: list[dict],
    output_dir: Path,
    content_type: str,
    chunk_size: int = 1000,
    indent: Optional[int] = 2,
    ) -> list[Path]:
    """Write `<type>-chunk-<n>.json` files and `<type>-index.json`. Returns written paths.

    Chunks are numbered from 1 and hold at most chunk_size items each.
    """
    chunks_dir = output_dir / CHUNKS_DIR
    chunks_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for start in range(0, len(items), chunk_size):
        chunk_path = chunks_dir / f"{content_type}-chunk-{start // chunk_size + 1}.json"
        _write_json(chunk_path, items[start:start + chunk_size], indent)
        written.append(chunk_path)

    index_path = output_dir / f"{content_type}-index.json"
    _write_json(index_path, {"items": items, "total": len(items)}, indent)
    written.append(index_path)
    return written


def build_tags_index(items_by_type: dict[str, list[dict]]) -> list[dict]:
    """Aggregate front-matter tags across all items, sorted by tag name."""
    tags: dict[str, dict] = {}
    for items in items_by_type.values():
        for item in items:
            for tag in item.get("frontmatter", {}).get("tags", []):
                entry = tags.setdefault(tag, {"count": 0, "items": []})
                entry["count"] += 1
                entry["items"].append(item["id"])
    return [{"name": name, **tags[name]} for name in sorted(tags)]


def _plain_text(item: dict) -> str:
    """Text-block contents joined by spaces, with HTML tags removed."""
    text = " ".join(b["content"] for b in item.get("content", []) if b.get("type") == "text")
    return HTML_TAG_RE.sub("", text)


def build_search_index(items_by_type: dict[str, list[dict]], today: Optional[str] = None) -> list[dict]:
    """One search entry per item; missing dates fall back to today (ISO format)."""
    today = today or datetime.now().date().isoformat()
    documents = []
    for content_type, items in items_by_type.items():
        singular = content_type[:-1] if content_type.endswith("s") else content_type
        for item in items:
            fm = item.get("frontmatter", {})
            documents.append({
                "id": item["id"],
                "type": content_type,
                "title": fm.get("title") or "Untitled",
                "content": _plain_text(item),
                "tags": fm.get("tags", []),
                "date": fm.get("date") or today,
                "url": f"/{singular}/{item['id']}",
            })
    return documents


def write_indexes(
    items_by_type: dict[str, list[dict]],
    output_dir: Path,
    indent: Optional[int] = 2,
    ) -> tuple[Path, Path]:
    """Write tags.json and search-index.json. Returns (tags_path, search_path)."""
    output_dir.mkdir(parents=True, exist_ok=True)
    tags_path = output_dir / TAGS_FILE
    search_path = output_dir / SEARCH_FILE
    _write_json(tags_path, build_tags_index(items_by_type), indent)
    _write_json(search_path, build_search_index(items_by_type), indent)
    return tags_path, search_path

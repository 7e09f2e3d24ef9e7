"""Snippet catalog and snippet-card reference resolution"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from rstpub.core.models import EmbeddedSnippet, ParsedDocument, ResolvedDocument


logger = logging.getLogger(__name__)

SNIPPET_REF = "snippet-card-ref"


@dataclass(frozen=True)
class SnippetCatalog:
    """Parsed snippets addressable by id (the snippet file's slug)."""
    snippets: Mapping[str, EmbeddedSnippet] = field(default_factory=dict)

    @classmethod
    def from_documents(cls, documents: Mapping[str, ParsedDocument]) -> "SnippetCatalog":
        return cls({
            snippet_id: EmbeddedSnippet(
                id=snippet_id,
                title=doc.frontmatter.title or snippet_id,
                blocks=doc.blocks,
                tags=doc.frontmatter.tags,
            )
            for snippet_id, doc in documents.items()
        })

    def get(self, snippet_id: str) -> Optional[EmbeddedSnippet]:
        return self.snippets.get(snippet_id)

    def __contains__(self, snippet_id: str) -> bool:
        return snippet_id in self.snippets

    def __len__(self) -> int:
        return len(self.snippets)


def resolve(document: ParsedDocument, catalog: SnippetCatalog) -> ResolvedDocument:
    """Replace snippet-card-ref blocks with embedded snippets; unknown ids are dropped."""
    blocks: list = []
    for block in document.blocks:
        if block.block_type != SNIPPET_REF:
            blocks.append(block)
            continue
        snippet = catalog.get(block.content)
        if snippet is None:
            logger.warning("Unknown snippet reference %r; block dropped", block.content)
            continue
        blocks.append(snippet)
    return ResolvedDocument(
        frontmatter=document.frontmatter,
        blocks=tuple(blocks),
        snippet_refs=document.snippet_refs,
    )

"""Immutable result models for parsed and resolved documents"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FrontMatter(BaseModel):
    """Metadata header of a document; every field defaults to empty."""
    model_config = ConfigDict(frozen=True)

    title:       str = ""
    date:        str = ""           # opaque, never parsed
    tags:        tuple[str, ...] = ()
    author:      str = ""
    snippet_id:  str = ""
    github_url:  str = ""
    demo_url:    str = ""
    description: str = ""
    cover_image: str = ""


class ContentBlock(BaseModel):
    """One unit of document body: prose text or a directive result."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    block_type: str = Field(alias="type")
    content:    str
    id:         str = ""            # reserved; the parser never fills it
    language:   Optional[str] = None  # code-block only


class ParsedDocument(BaseModel):
    """Front-matter, ordered content blocks, and snippet ids in encounter order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frontmatter:  FrontMatter = FrontMatter()
    blocks:       tuple[ContentBlock, ...] = Field(default=(), alias="content")
    snippet_refs: tuple[str, ...] = ()


class EmbeddedSnippet(BaseModel):
    """A snippet-card reference replaced by the snippet it points to."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    block_type: str = Field(default="embedded-snippet", alias="type")
    id:         str
    title:      str
    blocks:     tuple[ContentBlock, ...] = Field(default=(), alias="content")
    tags:       tuple[str, ...] = ()


class ResolvedDocument(BaseModel):
    """A ParsedDocument whose snippet references have been embedded."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frontmatter:  FrontMatter = FrontMatter()
    blocks:       tuple[Union[EmbeddedSnippet, ContentBlock], ...] = Field(default=(), alias="content")
    snippet_refs: tuple[str, ...] = ()

"""Directive kinds recognized by the body scanner, keyed by their line prefix"""

from dataclasses import dataclass
from typing import Iterable

from rstpub.core.frontmatter import split_lines
from rstpub.core.models import ContentBlock


INDENT = "   "                   # directive body lines start with three spaces
DEFAULT_DIRECTIVES = ("snippet-card",)


def text_block(content: str) -> ContentBlock:
    return ContentBlock(block_type="text", content=content)


@dataclass(frozen=True)
class Directive:
    """Base directive: an argument on the start line plus an indented body."""
    name: str
    records_ref: bool = False    # argument is appended to ParsedDocument.snippet_refs

    @property
    def prefix(self) -> str:
        return f".. {self.name}::"

    def argument(self, line: str) -> str:
        return line[len(self.prefix):].strip()

    def continues(self, line: str) -> bool:
        """Return True if line belongs to the directive body."""
        return line.startswith(INDENT) or not line.strip()

    def body_line(self, line: str) -> str:
        return line + "\n"

    def close(self, argument: str, body: str) -> list[ContentBlock]:
        """Blocks emitted when a non-body line terminates the directive."""
        return []

    def close_at_eof(self, argument: str, body: str) -> list[ContentBlock]:
        """Blocks emitted when input ends inside the directive."""
        return []


@dataclass(frozen=True)
class SnippetCard(Directive):
    """`.. snippet-card:: <id>`: a reference block followed by the body as text."""
    name: str = "snippet-card"
    records_ref: bool = True

    def close(self, argument: str, body: str) -> list[ContentBlock]:
        blocks = [ContentBlock(block_type=f"{self.name}-ref", content=argument)]
        if body.strip():
            blocks.append(text_block(body.strip()))
        return blocks


@dataclass(frozen=True)
class CodeBlock(Directive):
    """`.. code-block:: <language>`: the dedented body as a code block."""
    name: str = "code-block"

    def body_line(self, line: str) -> str:
        if line.startswith(INDENT):
            line = line[len(INDENT):]
        return line + "\n"

    def close(self, argument: str, body: str) -> list[ContentBlock]:
        content = body.rstrip() + "\n" if body else ""
        return [ContentBlock(block_type=self.name, content=content, language=argument or "text")]

    def close_at_eof(self, argument: str, body: str) -> list[ContentBlock]:
        return self.close(argument, body)


@dataclass(frozen=True)
class Toctree(Directive):
    """`.. toctree::`: section ids listed in the body, rendered as titles."""
    name: str = "toctree"

    @staticmethod
    def _title(entry: str) -> str:
        return " ".join(word[:1].upper() + word[1:] for word in entry.split("-"))

    def close(self, argument: str, body: str) -> list[ContentBlock]:
        titles = []
        for line in split_lines(body):
            entry = line.strip()
            if not entry or entry.startswith(":"):
                continue
            if " " in entry or '"' in entry or "'" in entry:
                continue
            titles.append(self._title(entry))
        if not titles:
            return []
        return [ContentBlock(block_type=self.name, content="\n".join(titles))]


REGISTRY: dict[str, Directive] = {d.name: d for d in (SnippetCard(), CodeBlock(), Toctree())}


def get_directives(names: Iterable[str] = DEFAULT_DIRECTIVES) -> tuple[Directive, ...]:
    """Look up directives by name; raises ValueError for an unknown name."""
    directives = []
    for name in names:
        if name not in REGISTRY:
            raise ValueError(f"Unknown directive: {name!r} (known: {', '.join(sorted(REGISTRY))})")
        directives.append(REGISTRY[name])
    return tuple(directives)

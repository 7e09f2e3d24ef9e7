"""Document parsing: front-matter extraction and the line-oriented directive scan"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from rstpub.core.directives import DEFAULT_DIRECTIVES, Directive, get_directives, text_block
from rstpub.core.frontmatter import parse_frontmatter, split_frontmatter, split_lines
from rstpub.core.models import ContentBlock, ParsedDocument


logger = logging.getLogger(__name__)


class ScanState(str, Enum):
    """Body scanner states"""
    outside = "outside"
    inside_directive = "inside_directive"


@dataclass
class _Scan:
    """Running state of a single forward scan over the body lines."""
    state:      ScanState = ScanState.outside
    text:       list[str] = field(default_factory=list)
    directive:  Optional[Directive] = None
    argument:   str = ""
    body:       list[str] = field(default_factory=list)
    blocks:     list[ContentBlock] = field(default_factory=list)
    refs:       list[str] = field(default_factory=list)

    def flush_text(self) -> None:
        content = "".join(self.text).strip()
        if content:
            self.blocks.append(text_block(content))
        self.text = []

    def start(self, directive: Directive, line: str) -> None:
        if self.state is ScanState.inside_directive:
            logger.debug("Directive %s %r superseded before termination; dropped",
                         self.directive.name, self.argument)
        self.flush_text()
        self.directive = directive
        self.argument = directive.argument(line)
        if directive.records_ref:
            self.refs.append(self.argument)
        self.body = []
        self.state = ScanState.inside_directive

    def terminate(self, line: str) -> None:
        self.blocks.extend(self.directive.close(self.argument, "".join(self.body)))
        self.directive = None
        self.state = ScanState.outside
        self.text = [line + "\n"]

    def finish(self) -> None:
        if self.state is ScanState.inside_directive:
            closing = self.directive.close_at_eof(self.argument, "".join(self.body))
            if not closing:
                logger.debug("Directive %s %r open at end of input; dropped",
                             self.directive.name, self.argument)
            self.blocks.extend(closing)
        self.flush_text()


class DocumentParser:
    """Stateless parser; the directive table is fixed at construction."""

    def __init__(self, directives: Iterable[str] = DEFAULT_DIRECTIVES):
        self._directives = get_directives(directives)

    def _match(self, line: str) -> Optional[Directive]:
        for directive in self._directives:
            if line.startswith(directive.prefix):
                return directive
        return None

    def scan(self, lines: Iterable[str]) -> tuple[list[ContentBlock], list[str]]:
        """Split body lines into content blocks; returns (blocks, snippet_refs)."""
        scan = _Scan()
        for line in lines:
            directive = self._match(line)
            if directive is not None:
                scan.start(directive, line)
            elif scan.state is ScanState.inside_directive:
                if scan.directive.continues(line):
                    scan.body.append(scan.directive.body_line(line))
                else:
                    scan.terminate(line)
            else:
                scan.text.append(line + "\n")
        scan.finish()
        return scan.blocks, scan.refs

    def parse(self, text: str) -> ParsedDocument:
        """Parse a whole document. Never raises; missing sections yield defaults."""
        lines = split_lines(text)
        fm_text, fm_end = split_frontmatter(lines)
        body = lines if fm_end is None else lines[fm_end + 1:]
        blocks, refs = self.scan(body)
        return ParsedDocument(
            frontmatter=parse_frontmatter(fm_text),
            blocks=tuple(blocks),
            snippet_refs=tuple(refs),
        )


_default_parser = DocumentParser()


def parse(text: str) -> ParsedDocument:
    """Parse text with the default directive table (snippet-card only)."""
    return _default_parser.parse(text)

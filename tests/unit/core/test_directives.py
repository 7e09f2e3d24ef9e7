"""Unit tests for core/directives.py and optional directive kinds"""

import pytest

from rstpub.core.directives import (
    DEFAULT_DIRECTIVES,
    CodeBlock,
    SnippetCard,
    Toctree,
    get_directives,
)


def _kinds(doc):
    return [(b.block_type, b.content) for b in doc.blocks]


def test_default_directives_snippet_card_only():
    assert DEFAULT_DIRECTIVES == ("snippet-card",)
    assert [d.name for d in get_directives()] == ["snippet-card"]


def test_get_directives_preserves_order():
    names = ["toctree", "snippet-card", "code-block"]
    assert [d.name for d in get_directives(names)] == names


def test_get_directives_unknown_name():
    with pytest.raises(ValueError, match="Unknown directive: 'note'"):
        get_directives(["note"])


@pytest.mark.parametrize("directive,prefix", [
    (SnippetCard(), ".. snippet-card::"),
    (CodeBlock(), ".. code-block::"),
    (Toctree(), ".. toctree::"),
])
def test_prefix(directive, prefix):
    assert directive.prefix == prefix


@pytest.mark.parametrize("line,expected", [
    ("   three spaces", True),
    ("      deeper", True),
    ("", True),
    ("   ", True),
    ("\t", True),
    ("  two spaces", False),
    ("flush", False),
])
def test_continues(line, expected):
    assert SnippetCard().continues(line) is expected


def test_snippet_card_close_with_and_without_body():
    card = SnippetCard()
    blocks = card.close("abc", "   one\n\n")
    assert [(b.block_type, b.content) for b in blocks] == [("snippet-card-ref", "abc"), ("text", "one")]
    assert len(card.close("abc", "\n\n")) == 1


def test_snippet_card_open_at_eof_emits_nothing():
    assert SnippetCard().close_at_eof("abc", "   body\n") == []


def test_code_block(full_parser):
    doc = full_parser.parse(
        "Intro\n"
        ".. code-block:: python\n"
        "\n"
        "   def f():\n"
        "       return 1\n"
        "\n"
        "After\n"
    )
    assert doc.snippet_refs == ()
    code = doc.blocks[1]
    assert code.block_type == "code-block"
    assert code.language == "python"
    assert code.content == "\ndef f():\n    return 1\n"
    assert _kinds(doc)[0] == ("text", "Intro")
    assert _kinds(doc)[2] == ("text", "After")


def test_code_block_default_language(full_parser):
    doc = full_parser.parse(".. code-block::\n   x = 1\nend\n")
    assert doc.blocks[0].language == "text"


def test_code_block_open_at_eof_is_emitted(full_parser):
    doc = full_parser.parse(".. code-block:: sh\n   ls -la\n\n")
    assert len(doc.blocks) == 1
    assert doc.blocks[0].content == "ls -la\n"
    assert doc.blocks[0].language == "sh"


def test_toctree(full_parser):
    doc = full_parser.parse(
        ".. toctree::\n"
        "   :maxdepth: 2\n"
        "\n"
        "   getting-started\n"
        "   api-reference\n"
        "   not a section\n"
        "   \"quoted\"\n"
        "Next\n"
    )
    assert _kinds(doc) == [
        ("toctree", "Getting Started\nApi Reference"),
        ("text", "Next"),
    ]


def test_toctree_without_entries_emits_nothing(full_parser):
    doc = full_parser.parse(".. toctree::\n   :maxdepth: 1\nNext\n")
    assert _kinds(doc) == [("text", "Next")]


def test_mixed_directives(full_parser):
    doc = full_parser.parse(
        ".. snippet-card:: s1\n"
        ".. code-block:: py\n"
        "   pass\n"
        ".. snippet-card:: s2\n"
        "done\n"
    )
    # code-block supersedes the open snippet-card; snippet-card supersedes the code block
    assert doc.snippet_refs == ("s1", "s2")
    assert _kinds(doc) == [("snippet-card-ref", "s2"), ("text", "done")]

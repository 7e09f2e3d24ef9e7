"""Shared fixtures for core unit tests"""

import pytest

from rstpub.core.parse import DocumentParser


SAMPLE_RST = """\
---
title: "Binary Search"
date: 2023-05-01
tags: [algorithms, "search", python]
author: Ada
snippet_id: bsearch
github_url: "https://github.com/example/bsearch"
demo_url: https://example.com/demo
---
Binary search halves the range each step.

.. snippet-card:: bsearch-impl
   Iterative version.

   Runs in O(log n).

It needs sorted input.
"""

SAMPLE_NO_FM = """\
Just prose.

More prose.
"""


@pytest.fixture(name="sample_rst")
def sample_rst_fixture():
    return SAMPLE_RST


@pytest.fixture(name="sample_no_fm")
def sample_no_fm_fixture():
    return SAMPLE_NO_FM


@pytest.fixture(name="parser")
def parser_fixture():
    return DocumentParser()


@pytest.fixture(name="full_parser")
def full_parser_fixture():
    return DocumentParser(["snippet-card", "code-block", "toctree"])

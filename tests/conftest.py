"""Root test configuration: a small on-disk content tree"""

from pathlib import Path

import pytest


POST = """\
---
title: "Hello Post"
date: 2024-01-02
tags: [python, "rst"]
---
Intro paragraph.

.. snippet-card:: quicksort
   Sorting example.

Closing words.
.. snippet-card:: missing-one
   Unknown snippet.

The end.
"""

SNIPPET = """\
---
title: Quicksort
tags: [python, algorithms]
---
Partition and recurse.
"""

PROJECT = """\
---
title: <b>Toolkit</b>
github_url: "https://example.com/toolkit"
---
A <em>project</em> page.
"""


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path) -> Path:
    """Content root with one post, one snippet, and one project."""
    root = tmp_path / "_content"
    for content_type, name, text in (
        ("posts", "hello.rst", POST),
        ("snippets", "quicksort.rst", SNIPPET),
        ("projects", "toolkit.rst", PROJECT),
    ):
        d = root / content_type
        d.mkdir(parents=True, exist_ok=True)
        (d / name).write_text(text, encoding="utf-8")
    return root

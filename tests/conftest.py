"""Root test configuration: a small content tree shared by loader and CLI tests"""

import logging
from pathlib import Path

import pytest


HELLO_WORLD = """\
---
title: "Hello World"
date: "2023-10-01"
toc: false
---
Hi, I'm writing here now. My first real post is about
[using Optional well](/posts/optional-usage/).

![me](./me.png)
"""

OPTIONAL_USAGE = """\
---
title: "Optional is not a field type"
date: "2023-10-15"
tags: [java, api-design]
---
## The pitfall

Passing `Optional` around as a parameter hides intent.

## What to do instead

See [the intro](/posts/hello-world/) and [a missing one](/posts/not-written-yet/).
"""

MISSING_DATE = """\
---
title: "Draft"
---
No date yet.
"""


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path) -> Path:
    """content/posts with two page bundles and one broken post."""
    root = tmp_path / "content" / "posts"
    for slug, text in [("hello-world", HELLO_WORLD), ("optional-usage", OPTIONAL_USAGE)]:
        bundle = root / slug
        bundle.mkdir(parents=True)
        (bundle / "index.md").write_text(text, encoding="utf-8")
    (root / "draft.md").write_text(MISSING_DATE, encoding="utf-8")
    (root / "hello-world" / "me.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so later tests never write to a closed stream."""
    yield
    logger = logging.getLogger("mdposts")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

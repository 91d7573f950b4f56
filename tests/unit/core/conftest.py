"""Shared sample texts for core unit tests"""

import pytest


SAMPLE_POST = """\
---
title: "Hello World"
date: "2023-10-01"
toc: false
---
Hi, body text.
"""

SAMPLE_BODY = """\
# Why Optional?

Some text with [a link](https://example.com/page) and
a [post link](/posts/other-post/#section).

![diagram](./diagram.png)

## Pitfalls

```java
Optional<String> name;
```

### Fixing it

[back](/posts/other-post/) again.
"""


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST


@pytest.fixture(name="sample_body")
def sample_body_fixture():
    return SAMPLE_BODY

"""Shared fixtures: sample posts modelled on the NSError and iOS 7 articles."""

from pathlib import Path

import pytest

from postcorpus.settings import get_settings

NSERROR_POST = '''---
layout: post
title: NSError
category: Cocoa
excerpt: "NSError is the unsung hero of the Foundation framework."
---

To be human is to err. In Cocoa, that means `NSError`.

```objective-c
NSError *error = nil;
BOOL success = [fileManager removeItemAtPath:path error:&error];
```
'''

IOS7_POST = '''---
layout: post
title: iOS 7
category: ""
excerpt: "A look at some of the lesser-known APIs of iOS 7."
---

With the NDA finally lifted, we can talk about iOS 7.
'''

MISSING_EXCERPT_POST = '''---
layout: post
title: NSHipster Quiz
---

Body.
'''

NO_FRONTMATTER_POST = "Just some prose, no metadata at all.\n"

ENV_VARS = ("CORPUS_PATH", "CORPUS_EXTENSIONS", "LOAD_WORKERS", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    posts = tmp_path / "_posts"
    posts.mkdir()
    (posts / "2013-04-09-nserror.md").write_text(NSERROR_POST, encoding="utf-8")
    (posts / "2013-09-23-ios7.md").write_text(IOS7_POST, encoding="utf-8")
    return posts


@pytest.fixture
def broken_corpus_dir(corpus_dir: Path) -> Path:
    (corpus_dir / "2013-10-01-quiz.md").write_text(MISSING_EXCERPT_POST, encoding="utf-8")
    (corpus_dir / "notes.md").write_text(NO_FRONTMATTER_POST, encoding="utf-8")
    return corpus_dir

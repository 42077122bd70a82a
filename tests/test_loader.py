"""Tests for the corpus loader."""

from datetime import date
from pathlib import Path

import pytest

from postcorpus.contracts.document import DocumentSource
from postcorpus.corpus.discovery import scan_corpus
from postcorpus.corpus.errors import (
    CorpusLoadError,
    DuplicateSlug,
    InvalidDateFormat,
    MalformedFrontMatter,
    MissingRequiredField,
    UndecodableSource,
)
from postcorpus.corpus.loader import CorpusLoader

from conftest import IOS7_POST, MISSING_EXCERPT_POST, NO_FRONTMATTER_POST, NSERROR_POST


def post(filename: str, title: str = "Title", excerpt: str = "Excerpt", **extra: str) -> DocumentSource:
    lines = ["---", f"title: {title}", f"excerpt: {excerpt}"]
    lines.extend(f"{k}: {v}" for k, v in extra.items())
    lines.append("---")
    return DocumentSource(filename=filename, text="\n".join(lines) + "\nBody\n")


def test_warnings_survive_a_rejected_post() -> None:
    source = DocumentSource(
        filename="2013-10-01-quiz.md",
        text="---\ntitle: Quiz\nauthor: Mattt\n---\nBody\n",
    )
    result = CorpusLoader().load([source])

    assert [f.kind for f in result.errors] == ["MissingRequiredField"]
    assert [(s, w.key) for s, w in result.warnings] == [("2013-10-01-quiz.md", "author")]


def test_loads_valid_corpus_in_input_order() -> None:
    sources = [
        DocumentSource(filename="2013-09-23-ios7.md", text=IOS7_POST),
        DocumentSource(filename="2013-04-09-nserror.md", text=NSERROR_POST),
    ]
    result = CorpusLoader().load(sources)

    assert result.ok
    assert [r.slug for r in result.records] == ["ios7", "nserror"]
    assert [r.slug for r in result.chronological()] == ["nserror", "ios7"]
    assert [r.slug for r in result.chronological(reverse=True)] == ["ios7", "nserror"]


def test_bad_documents_do_not_abort_the_batch() -> None:
    sources = [
        DocumentSource(filename="2013-04-09-nserror.md", text=NSERROR_POST),
        DocumentSource(filename="notes.md", text=NO_FRONTMATTER_POST),
        DocumentSource(filename="2013-10-01-quiz.md", text=MISSING_EXCERPT_POST),
        DocumentSource(filename="2013-13-01-bad-date.md", text=IOS7_POST),
        DocumentSource(filename="2013-09-23-ios7.md", text=IOS7_POST),
    ]
    result = CorpusLoader().load(sources)

    assert [r.slug for r in result.records] == ["nserror", "ios7"]
    assert [f.source for f in result.errors] == [
        "notes.md",
        "2013-10-01-quiz.md",
        "2013-13-01-bad-date.md",
    ]
    assert isinstance(result.errors[0].error, MalformedFrontMatter)
    assert isinstance(result.errors[1].error, MissingRequiredField)
    assert result.errors[1].error.fields == ("excerpt",)
    assert isinstance(result.errors[2].error, InvalidDateFormat)
    assert result.total == len(sources)
    assert not result.ok


def test_duplicate_slug_keeps_first_and_reports_second() -> None:
    first = post("2013-04-09-nserror.md", title="First")
    second = post("2014-01-01-nserror.md", title="Second")
    result = CorpusLoader().load([first, second])

    assert len(result.records) == 1
    assert result.records[0].title == "First"
    assert len(result.errors) == 1

    failure = result.errors[0]
    assert failure.source == "2014-01-01-nserror.md"
    assert failure.kind == "DuplicateSlug"
    assert isinstance(failure.error, DuplicateSlug)
    assert failure.error.slug == "nserror"
    assert failure.error.first_source == "2013-04-09-nserror.md"


def test_rejected_document_does_not_claim_its_slug() -> None:
    broken = DocumentSource(filename="2013-04-09-nserror.md", text="no front matter")
    good = post("2014-01-01-nserror.md")
    result = CorpusLoader().load([broken, good])

    assert [r.source for r in result.records] == ["2014-01-01-nserror.md"]
    assert [f.kind for f in result.errors] == ["MalformedFrontMatter"]


@pytest.mark.parametrize("bad_count", [0, 1, 3, 7])
def test_every_source_is_accounted_for(bad_count: int) -> None:
    good = [post(f"2013-01-{day:02d}-post-{day}.md") for day in range(1, 11)]
    bad = [
        DocumentSource(filename=f"2013-02-{day:02d}-broken-{day}.md", text="oops")
        for day in range(1, bad_count + 1)
    ]
    result = CorpusLoader().load(good + bad)

    assert len(result.records) == len(good)
    assert len(result.errors) == bad_count
    assert result.total == len(good) + bad_count


def test_unrecognized_keys_are_warnings_not_errors() -> None:
    result = CorpusLoader().load([post("2013-04-09-nserror.md", author="Mattt")])

    assert result.ok
    assert result.records[0].extra == {"author": "Mattt"}
    assert [(source, w.key) for source, w in result.warnings] == [
        ("2013-04-09-nserror.md", "author")
    ]


def test_parallel_load_matches_sequential() -> None:
    sources = [post(f"2013-01-{day:02d}-post-{day % 5}.md") for day in range(1, 29)]
    sources.insert(3, DocumentSource(filename="broken.md", text="---\nnope\n---\n"))

    sequential = CorpusLoader().load(sources)
    parallel = CorpusLoader(workers=4).load(sources)

    assert [r.source for r in parallel.records] == [r.source for r in sequential.records]
    assert [(f.source, f.kind) for f in parallel.errors] == [
        (f.source, f.kind) for f in sequential.errors
    ]
    assert len(parallel.records) == 5


def test_workers_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CorpusLoader(workers=0)


def test_helpers() -> None:
    result = CorpusLoader().load(
        [
            post("2013-04-09-nserror.md", category="Cocoa"),
            post("2013-09-23-ios7.md"),
            post("2013-05-01-nsurl.md", category="Cocoa"),
        ]
    )

    assert result.get("ios7").published_date == date(2013, 9, 23)
    assert result.get("missing") is None
    assert {k: [r.slug for r in v] for k, v in result.by_category().items()} == {
        "Cocoa": ["nserror", "nsurl"],
        "": ["ios7"],
    }


def test_raise_for_errors_is_opt_in() -> None:
    result = CorpusLoader().load([DocumentSource(filename="notes.md", text="plain")])
    assert len(result.errors) == 1

    with pytest.raises(CorpusLoadError) as exc_info:
        result.raise_for_errors()
    assert exc_info.value.failures[0][0] == "notes.md"
    assert "MalformedFrontMatter" in str(exc_info.value)


def test_load_directory(broken_corpus_dir: Path) -> None:
    result = CorpusLoader().load_directory(broken_corpus_dir)

    assert [r.source for r in result.records] == [
        "2013-04-09-nserror.md",
        "2013-09-23-ios7.md",
    ]
    assert sorted(f.source for f in result.errors) == ["2013-10-01-quiz.md", "notes.md"]


def test_reload_builds_equal_records(corpus_dir: Path) -> None:
    loader = CorpusLoader()
    first = loader.load_directory(corpus_dir)
    second = loader.load_directory(corpus_dir)

    assert first.records == second.records
    assert first.records[0] is not second.records[0]


def test_package_exposes_loader_lazily() -> None:
    import postcorpus

    assert postcorpus.CorpusLoader is CorpusLoader
    with pytest.raises(AttributeError):
        postcorpus.NotAThing


def test_undecodable_file_is_a_document_failure(corpus_dir: Path) -> None:
    (corpus_dir / "2013-05-01-latin1.md").write_bytes(
        b"---\ntitle: caf\xe9\nexcerpt: x\n---\nBody\n"
    )

    discovery = scan_corpus(corpus_dir)
    assert [s.filename for s in discovery.sources] == [
        "2013-04-09-nserror.md",
        "2013-09-23-ios7.md",
    ]
    assert [name for name, _ in discovery.failures] == ["2013-05-01-latin1.md"]

    result = CorpusLoader().load_discovered(discovery)
    assert [r.slug for r in result.records] == ["nserror", "ios7"]
    assert result.total == 3

    failure = result.errors[0]
    assert failure.source == "2013-05-01-latin1.md"
    assert isinstance(failure.error, UndecodableSource)
    assert isinstance(failure.error, MalformedFrontMatter)
    assert failure.kind == "MalformedFrontMatter"


def test_scan_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        scan_corpus(tmp_path / "nope")

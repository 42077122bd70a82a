"""postcorpus - front-matter blog post corpus loader."""

__version__ = "0.1.0"


# Lazy imports to keep `import postcorpus` cheap for the CLI
def __getattr__(name: str):
    if name == "CorpusLoader":
        from postcorpus.corpus.loader import CorpusLoader

        return CorpusLoader
    if name == "DocumentRecord":
        from postcorpus.contracts.document import DocumentRecord

        return DocumentRecord
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CorpusLoader", "DocumentRecord", "__version__"]

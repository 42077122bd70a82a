"""Export of loaded corpora for external renderers."""

from postcorpus.export.manifest import (
    build_manifest,
    dump_manifest,
    load_manifest,
    write_manifest,
)

__all__ = ["build_manifest", "dump_manifest", "load_manifest", "write_manifest"]

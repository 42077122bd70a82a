"""One-glance load summary for the CLI."""

from dataclasses import dataclass
from pathlib import Path

import click

from postcorpus.corpus.loader import LoadResult


@dataclass(frozen=True)
class LoadSummary:
    corpus_path: Path
    loaded: int
    rejected: int
    warnings: int
    elapsed: float

    @classmethod
    def from_result(cls, result: LoadResult, corpus_path: Path, elapsed: float) -> "LoadSummary":
        return cls(
            corpus_path=corpus_path,
            loaded=len(result.records),
            rejected=len(result.errors),
            warnings=len(result.warnings),
            elapsed=elapsed,
        )

    @property
    def total(self) -> int:
        return self.loaded + self.rejected

    def lines(self) -> list[str]:
        """Status line plus counts; colors are dropped by click.echo off a tty."""
        if self.rejected:
            mark = click.style("✗", fg="red")
        else:
            mark = click.style("✓", fg="green")

        return [
            f"{mark} Found {self.total} post(s) in {self.corpus_path} "
            + click.style(f"({self.elapsed:.2f}s)", dim=True),
            f"    → Loaded {self.loaded}, rejected {self.rejected}, "
            f"{self.warnings} unrecognized key(s)",
        ]


__all__ = ["LoadSummary"]

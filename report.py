# report.py
# -------------------------------------------------------------
# Run-scoped accumulator for validation results.
# Two entry kinds share one ordered sequence:
#   Violation  -> an asset was read but breaks a rule
#   IOFailure  -> an asset/directory could not be read or decoded
# -------------------------------------------------------------

from dataclasses import dataclass, field
from typing import List, Union

import pandas as pd

REPORT_COLS: List[str] = ["locale", "asset", "kind", "message"]


@dataclass(frozen=True)
class Violation:
    locale: str
    asset: str     # path relative to the locale directory ("" = the locale itself)
    message: str
    kind = "violation"


@dataclass(frozen=True)
class IOFailure:
    locale: str
    asset: str
    message: str
    kind = "io_failure"


Entry = Union[Violation, IOFailure]


@dataclass
class RunReport:
    """
    Append-only, never filtered or deduplicated.
    Any entry at all means the run failed.
    """
    metadata_path: str
    entries: List[Entry] = field(default_factory=list)

    def add_violations(self, locale: str, asset: str, messages: List[str]) -> None:
        for m in messages:
            self.entries.append(Violation(locale, asset, m))

    def add_failure(self, locale: str, asset: str, message: str) -> None:
        self.entries.append(IOFailure(locale, asset, message))

    @property
    def violations(self) -> List[Violation]:
        return [e for e in self.entries if isinstance(e, Violation)]

    @property
    def failures(self) -> List[IOFailure]:
        return [e for e in self.entries if isinstance(e, IOFailure)]

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def ok(self) -> bool:
        return len(self.entries) == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {"locale": e.locale, "asset": e.asset, "kind": e.kind, "message": e.message}
            for e in self.entries
        ]
        return pd.DataFrame(rows, columns=REPORT_COLS)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class ReportRow:
    """
    One data row of the settlement report after normalization.

    ``values`` holds every header column as a string (missing cells are ``""``),
    with the grouping columns already forward-filled. The three ``*_key`` fields
    are trimmed, lower-cased lookups used by the aggregation rules.
    """
    idx: int  # 0-based position among the data rows
    values: Mapping[str, str] = field(hash=False)  # read-only view
    cycle_key: str = ""
    type_key: str = ""
    channel_key: str = ""

    def get(self, column: str) -> str:
        return self.values.get(column, "")

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict


@dataclass(frozen=True)
class SettlementStamp:
    """
    Settlement date plus run number, with the string forms used in
    narrations, folder names and file names.
    """
    settlement_date: date
    run_number: int = 1

    @property
    def yyyymmdd(self) -> str:
        return self.settlement_date.strftime("%Y%m%d")

    @property
    def ddmmyy(self) -> str:
        return self.settlement_date.strftime("%d%m%y")

    @property
    def dd_mm_yy(self) -> str:
        return self.settlement_date.strftime("%d.%m.%y")

    @property
    def cycle(self) -> str:
        return f"{self.run_number}C"

    def placeholders(self) -> Dict[str, str]:
        return {
            "yyyymmdd": self.yyyymmdd,
            "ddmmyy": self.ddmmyy,
            "dd_mm_yy": self.dd_mm_yy,
            "cycle": self.cycle,
        }

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

from etoll_voucher.data_model.enum_run_status import EnumRunStatus

UNBALANCED_MESSAGE = "Debit and credit not tallied"


@dataclass(frozen=True)
class RunResult:
    status: EnumRunStatus
    path: Path
    debit_total: Decimal
    credit_total: Decimal
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is EnumRunStatus.OK

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "status": self.status.value,
            "path": str(self.path),
            "debit_total": self.debit_total,
            "credit_total": self.credit_total,
        }
        if self.message:
            out["message"] = self.message
        return out

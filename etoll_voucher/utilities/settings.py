# etoll_voucher/utilities/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_RUN_NUMBER = 1
DEFAULT_OUTPUT_ROOT = Path("E-tollAcquiringSettlement") / "Processing"

ENV_RUN_NUMBER = "ETOLL_RUN_NUMBER"
ENV_OUTPUT_ROOT = "ETOLL_OUTPUT_ROOT"


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Per-invocation configuration for the voucher generator.

    run_number
        Settlement run of the day; rendered as ``"<n>C"`` in narrations and
        ``"_N<n>"`` in the output file name.
    output_root
        Folder under which ``<year>/<month>/<day>/`` output folders are created.
    """

    run_number: int = DEFAULT_RUN_NUMBER
    output_root: Path = DEFAULT_OUTPUT_ROOT

    def __post_init__(self) -> None:
        if self.run_number < 1:
            raise ValueError(f"run_number must be positive, got {self.run_number}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorSettings":
        env = os.environ if environ is None else environ
        run_number = DEFAULT_RUN_NUMBER
        raw = env.get(ENV_RUN_NUMBER)
        if raw:
            try:
                run_number = int(raw)
            except ValueError as e:
                raise ValueError(f"{ENV_RUN_NUMBER} must be an integer, got {raw!r}") from e
        output_root = Path(env[ENV_OUTPUT_ROOT]) if env.get(ENV_OUTPUT_ROOT) else DEFAULT_OUTPUT_ROOT
        return cls(run_number=run_number, output_root=output_root)

    def with_overrides(
        self, run_number: Optional[int] = None, output_root: Optional[Path] = None
    ) -> "GeneratorSettings":
        changes = {}
        if run_number is not None:
            changes["run_number"] = run_number
        if output_root is not None:
            changes["output_root"] = Path(output_root)
        return replace(self, **changes)

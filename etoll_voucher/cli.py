#!/usr/bin/env python3
"""
Command-line entry point: build the voucher for one settlement report.

Exit codes:
- 0  voucher written and balanced
- 1  voucher written under the ERROR_ name (debit and credit not tallied)
- 2  input report not found
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from etoll_voucher.controllers.voucher_generator import generate
from etoll_voucher.utilities.config_logging import configure_logging
from etoll_voucher.utilities.settings import GeneratorSettings

log = logging.getLogger("etoll_voucher.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="etoll-voucher",
        description="Convert an e-toll daily settlement report into an acquiring voucher workbook.",
    )
    ap.add_argument("report", type=Path, help="Path to the settlement report (.xlsx)")
    ap.add_argument("--run-number", type=int, default=None,
                    help="Settlement run of the day (default: $ETOLL_RUN_NUMBER or 1)")
    ap.add_argument("--output-root", type=Path, default=None,
                    help="Root folder for <yyyy>/<mm>/<dd> output (default: $ETOLL_OUTPUT_ROOT "
                         "or E-tollAcquiringSettlement/Processing)")
    ap.add_argument("--log-level", default=None,
                    help="Console log level, e.g. DEBUG (default: INFO)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    settings = GeneratorSettings.from_env().with_overrides(
        run_number=args.run_number, output_root=args.output_root
    )
    try:
        result = generate(args.report, settings=settings, logger=log)
    except FileNotFoundError as e:
        log.error("%s", e)
        return 2

    print(result.to_dict())
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

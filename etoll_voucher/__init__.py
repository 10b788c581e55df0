"""E-toll acquiring settlement voucher generator."""

from etoll_voucher.controllers.voucher_generator import generate
from etoll_voucher.data_model import EnumRunStatus, RunResult
from etoll_voucher.utilities.settings import GeneratorSettings

__all__ = ["generate", "EnumRunStatus", "RunResult", "GeneratorSettings"]

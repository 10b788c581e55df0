from .config_logging import LOGGING, configure_logging
from .converters_scalar import round2, to_date, to_decimal
from .core_util import is_null_or_whitespace, safe_lower
from .settings import GeneratorSettings

__all__ = [
    "is_null_or_whitespace",
    "safe_lower",
    "to_date",
    "to_decimal",
    "round2",
    "GeneratorSettings",
    "LOGGING",
    "configure_logging",
]

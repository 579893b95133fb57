"""Run configuration loading."""
from .loader import CONFIG_SCHEMA, load_config
from .models import DEFAULT_SUITE, REPORT_FORMATS, RunOptions

__all__ = [
    "CONFIG_SCHEMA",
    "DEFAULT_SUITE",
    "REPORT_FORMATS",
    "RunOptions",
    "load_config",
]

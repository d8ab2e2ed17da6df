"""Site-lint: heuristic lint checks for static website trees."""

from site_lint.__version__ import __version__
from site_lint.config import Config, get_default_config, load_config
from site_lint.orchestrator import run_lint
from site_lint.types import Diagnostic, ScopeResult, Severity

__all__ = [
    "__version__",
    "Config",
    "load_config",
    "get_default_config",
    "run_lint",
    "Diagnostic",
    "ScopeResult",
    "Severity",
]

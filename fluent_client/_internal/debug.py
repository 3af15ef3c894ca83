"""Debug logging shared by the factory, resolver and dispatcher."""

import sys
from collections.abc import Mapping
from typing import Any

PREFIX = "[fluent-client]"


def log_debug(config: Mapping[str, Any], message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled in config."""
    if config.get("debug"):
        print(f"{PREFIX} {message}", file=sys.stderr)

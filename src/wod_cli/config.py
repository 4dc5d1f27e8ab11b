"""Environment-variable-based configuration for the command-line generator."""

from __future__ import annotations

import os

WEIGHTS_VERSION: str = os.environ.get("WOD_WEIGHTS_VERSION", "linchpin-2")
SEED: int | None = int(os.environ["WOD_SEED"]) if os.environ.get("WOD_SEED") else None
LOG_LEVEL: str = os.environ.get("WOD_LOG_LEVEL", "INFO").upper()
DEFAULT_STRUCTURE: str = os.environ.get("WOD_STRUCTURE", "single")

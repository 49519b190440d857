# topmark:header:start
#
#   project      : ScriptKit
#   file         : constants.py
#   file_relpath : src/scriptkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SCRIPTKIT_VERSION: str = get_version("scriptkit")
except PackageNotFoundError:  # running from a source checkout
    SCRIPTKIT_VERSION = "0.0.0+unknown"

# Environment variables consulted at runtime
ENV_LOG_LEVEL: str = "SCRIPTKIT_LOG_LEVEL"
ENV_DRY_RUN: str = "SCRIPTKIT_DRY_RUN"
ENV_DRY_RUN_LEGACY: str = "DRY_RUN"

TRUTHY_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

DETACHED_HEAD: str = "detached head"

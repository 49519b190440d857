# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration and logging for ScriptKit.

ScriptKit is configured through the environment: ``SCRIPTKIT_LOG_LEVEL``
selects the diagnostic log level and ``SCRIPTKIT_DRY_RUN`` (or the legacy
``DRY_RUN``) turns command execution into a preview. The CLI resolves both
once into a frozen [`RuntimeConfig`][scriptkit.config.model.RuntimeConfig].
"""

from __future__ import annotations

from scriptkit.config.model import RuntimeConfig

__all__ = ["RuntimeConfig"]

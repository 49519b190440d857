# topmark:header:start
#
#   project      : ScriptKit
#   file         : model.py
#   file_relpath : src/scriptkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration model.

`RuntimeConfig` is an immutable snapshot of the settings that influence how
ScriptKit behaves at runtime. It is resolved from the environment once (see
`RuntimeConfig.from_env`) and then passed around explicitly; callers that need
a variation derive a new instance with `with_overrides` instead of mutating it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from scriptkit.config.logging import resolve_env_log_level
from scriptkit.constants import ENV_DRY_RUN, ENV_DRY_RUN_LEGACY, TRUTHY_VALUES

if TYPE_CHECKING:
    from collections.abc import Mapping


def _is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True)
class RuntimeConfig:
    """Immutable runtime settings.

    Attributes:
        dry_run (bool): If True, commands executed through
            [`run`][scriptkit.utils.run.run] are only logged, never spawned.
        log_level (int | None): Diagnostic log level requested via the environment,
            or None to use the default.
    """

    dry_run: bool = False
    log_level: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuntimeConfig:
        """Resolve a configuration from environment variables.

        ``SCRIPTKIT_DRY_RUN`` takes precedence over the legacy ``DRY_RUN``.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.

        Returns:
            RuntimeConfig: The resolved configuration.
        """
        env = os.environ if environ is None else environ
        raw_dry_run = env.get(ENV_DRY_RUN)
        if raw_dry_run is None:
            raw_dry_run = env.get(ENV_DRY_RUN_LEGACY)
        return cls(
            dry_run=_is_truthy(raw_dry_run),
            log_level=resolve_env_log_level(env),
        )

    def with_overrides(self, **changes: Any) -> RuntimeConfig:
        """Return a copy of this configuration with ``changes`` applied."""
        return replace(self, **changes)

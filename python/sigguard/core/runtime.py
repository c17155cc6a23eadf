"""Runtime switch between checked dispatch and passthrough."""

import os
from typing import Mapping, Optional

from .dispatch import CHECKED, PASSTHROUGH

ENV_VAR = "SIGGUARD_CHECKS"
_DISABLED_VALUES = ("0", "false", "no", "off")


def checks_requested(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Read the checks toggle from the environment (enabled unless turned off)."""
    environ = os.environ if environ is None else environ
    value = environ.get(ENV_VAR, "1").strip().lower()
    return value not in _DISABLED_VALUES


class Runtime:
    """Selects which finalizer declared signatures are finalized with.

    The choice is made once per decorated function, at finalize time;
    wrapped functions never consult the runtime again.
    """

    def __init__(self, *, enabled: Optional[bool] = None):
        self.enabled = checks_requested() if enabled is None else enabled

    @property
    def finalizer(self):
        return CHECKED if self.enabled else PASSTHROUGH

    def __repr__(self) -> str:
        return f"Runtime(enabled={self.enabled})"


# Global runtime instance
_runtime = Runtime()


def configure(*, enabled: Optional[bool] = None) -> Runtime:
    """
    Turn signature checks on or off for functions finalized from now on.

    Args:
        enabled: New setting; None re-reads SIGGUARD_CHECKS

    Example:
        configure(enabled=False)  # production: finalize returns the target as is
    """
    _runtime.enabled = checks_requested() if enabled is None else enabled
    return _runtime

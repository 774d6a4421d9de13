"""Calculator configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 100


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class CalculatorConfig:
    """Settings shared by the pipeline and the command-line host.

    ``max_depth`` bounds parenthesis nesting for ``run``;
    0 disables the bound.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"
    prompt: str = "> "

    @classmethod
    def from_env(cls) -> CalculatorConfig:
        """Create config from environment variables.

        Reads INTCALC_MAX_DEPTH, INTCALC_LOG_LEVEL and INTCALC_PROMPT,
        falling back to the defaults for any that are unset.
        """
        return cls(
            max_depth=_int_from_env("INTCALC_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            log_level=os.environ.get("INTCALC_LOG_LEVEL", "WARNING").upper(),
            prompt=os.environ.get("INTCALC_PROMPT", "> "),
        )

    @property
    def depth_limit(self) -> int | None:
        """``max_depth`` as the parser expects it (None when disabled)."""
        if self.max_depth <= 0:
            return None
        return self.max_depth

"""Editor settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "MDEDIT_"


def _env(
    name: str, default: Optional[str] = None, *, environ: Mapping[str, str]
) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool, *, environ: Mapping[str, str]) -> bool:
    raw = _env(name, environ=environ)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, fallback: int, *, environ: Mapping[str, str]) -> int:
    raw = _env(name, environ=environ)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Knobs the host may tune; defaults match the stock editor."""

    indent_width: int = 4
    keep_indent: bool = False
    tab_indent: bool = True

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ValueError("indent_width must be positive")

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    env = os.environ if environ is None else environ
    width = _env_int("INDENT_WIDTH", 4, environ=env)
    return EditorSettings(
        indent_width=width if width > 0 else 4,
        keep_indent=_env_flag("KEEP_INDENT", False, environ=env),
        tab_indent=_env_flag("TAB_INDENT", True, environ=env),
    )


__all__ = ["ENV_PREFIX", "EditorSettings", "load_settings"]

"""Display themes: map report markers to rich (pictographic) or simple (ASCII) tokens."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Marker(str, Enum):
    success = "success"
    failure = "failure"
    unknown = "unknown"
    suggestion = "suggestion"
    skip = "skip"


class ThemeName(str, Enum):
    rich = "rich"
    simple = "simple"


class Theme(BaseModel):
    """Immutable marker → token mapping, shared freely between renderers.

    Tokens appear in bullet contexts only. Stage status lines always use
    the bracketed labels, so the rich success and unknown glyphs never
    show up on them.
    """

    model_config = ConfigDict(frozen=True)

    name: ThemeName
    success: str
    failure: str
    unknown: str
    suggestion: str
    skip: str

    def token(self, marker: Marker) -> str:
        return getattr(self, marker.value)


def create_rich_theme() -> Theme:
    return Theme(
        name=ThemeName.rich,
        success="✅",
        failure="❌",
        unknown="❓",
        suggestion="💡",
        skip="⏩",
    )


def create_simple_theme() -> Theme:
    # [X] doubles as the skip bullet.
    return Theme(
        name=ThemeName.simple,
        success="[V]",
        failure="[X]",
        unknown="[?]",
        suggestion="[*]",
        skip="[X]",
    )


_THEMES: dict[ThemeName, Theme] = {
    ThemeName.rich: create_rich_theme(),
    ThemeName.simple: create_simple_theme(),
}


def resolve_theme(name: ThemeName | str) -> Theme:
    """Return the built-in theme for a selector (``"rich"`` or ``"simple"``)."""
    return _THEMES[ThemeName(name)]

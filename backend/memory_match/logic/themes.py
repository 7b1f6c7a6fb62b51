"""
Card themes: symbol tables and per-theme card score bonus.

Index i of a theme's symbols supplies the pair key for pair i. Tables are
checked at import time so a malformed theme fails fast instead of dealing
a deck with duplicate or missing pairs.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from memory_match.logic.difficulty import MAX_PAIRS
from memory_match.logic.exceptions import UnsupportedSettingsError


class Theme(StrEnum):
    """Fixed set of card themes."""

    ANIMALS = "animals"
    FRUITS = "fruits"
    NUMBERS = "numbers"
    ANIME = "anime"


class ThemeConfig(BaseModel):
    """Display name, ordered symbols and score bonus for a theme."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    symbols: tuple[str, ...]
    score_bonus: int = 0


THEME_CONFIGS: dict[Theme, ThemeConfig] = {
    Theme.ANIMALS: ThemeConfig(
        display_name="Animals",
        symbols=(
            "🐶", "🐱", "🐭", "🐹", "🐰", "🦊",
            "🐻", "🐼", "🐨", "🐯", "🦁", "🐮",
            "🐷", "🐸", "🐵", "🐔", "🐧", "🦄",
        ),
        score_bonus=2,
    ),
    Theme.FRUITS: ThemeConfig(
        display_name="Fruits",
        symbols=(
            "🍎", "🍊", "🍋", "🍇", "🍓", "🫐",
            "🍑", "🍒", "🍍", "🥭", "🍏", "🍐",
            "🍌", "🍉", "🍈", "🥝", "🍆", "🌽",
        ),
    ),
    Theme.NUMBERS: ThemeConfig(
        display_name="Numbers",
        symbols=tuple(str(n) for n in range(1, 19)),
        score_bonus=5,
    ),
    Theme.ANIME: ThemeConfig(
        display_name="Anime",
        symbols=(
            "/images/asuka.png", "/images/chinatsu.png", "/images/elysia.png",
            "/images/frieren.png", "/images/gojo.png", "/images/heero.png",
            "/images/kaguya.png", "/images/lena.png", "/images/mai.png",
            "/images/mikasa.png", "/images/nisekoi.png", "/images/punpun.png",
            "/images/reiji.png", "/images/reze.png", "/images/ruby.png",
            "/images/sasuke.png", "/images/waguri.png", "/images/yukino.png",
        ),
        score_bonus=2,
    ),
}  # fmt: skip


def validate_theme(theme: Theme, config: ThemeConfig) -> None:
    """Raise UnsupportedSettingsError if a theme cannot supply MAX_PAIRS unique pairs."""
    if len(set(config.symbols)) != len(config.symbols):
        raise UnsupportedSettingsError(f"theme {theme.value} has duplicate symbols")
    if len(config.symbols) < MAX_PAIRS:
        raise UnsupportedSettingsError(
            f"theme {theme.value} has {len(config.symbols)} symbols, needs at least {MAX_PAIRS}"
        )


def get_theme_config(theme: Theme) -> ThemeConfig:
    return THEME_CONFIGS[theme]


for _theme, _config in THEME_CONFIGS.items():
    validate_theme(_theme, _config)

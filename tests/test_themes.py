from types import MappingProxyType

import pytest

from contrib_canvas.config.defaults import DEFAULT_THEMES
from contrib_canvas.visualization.themes import THEMES, Theme, build_themes, get_theme


def test_known_theme_is_returned() -> None:
    theme = get_theme("githubDark")

    assert theme.background == DEFAULT_THEMES["githubDark"]["background"]


@pytest.mark.parametrize("name", ["doesNotExist", "", None])
def test_unknown_theme_falls_back_to_standard(name) -> None:
    assert get_theme(name) == THEMES["standard"]


def test_lookup_uses_the_given_table() -> None:
    fake = Theme.from_mapping({"background": "#123456"}, fallback=THEMES["standard"])
    table = MappingProxyType({"standard": THEMES["standard"], "fake": fake})

    assert get_theme("fake", table) is fake
    assert get_theme("githubDark", table) == THEMES["standard"]


def test_grade_clamps_to_the_ramp() -> None:
    theme = THEMES["standard"]

    assert theme.grade(0) == theme.grade0
    assert theme.grade(2) == theme.grade2
    assert theme.grade(9) == theme.grade4
    assert theme.grade(-1) == theme.grade0


def test_from_mapping_requires_every_slot_without_fallback() -> None:
    with pytest.raises(ValueError, match="grade0"):
        Theme.from_mapping({"background": "#fff", "text": "#000", "meta": "#666"})


def test_custom_themes_fill_missing_slots_from_standard() -> None:
    themes = build_themes({"mine": {"grade4": "#ff0000"}})

    assert themes["mine"].grade4 == "#ff0000"
    assert themes["mine"].background == THEMES["standard"].background
    assert set(DEFAULT_THEMES) <= set(themes)


def test_theme_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        THEMES["standard"] = THEMES["classic"]  # type: ignore[index]

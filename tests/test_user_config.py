import json

import pytest

from contrib_canvas.config.user_config import (
    get_custom_themes,
    get_font_face,
    get_footer_text,
    get_scale_factor,
    get_theme_name,
    load_config,
    reset_config,
    set_preference,
)


def test_defaults_when_no_file_exists(config_file) -> None:
    assert not config_file.exists()

    assert get_theme_name() == "standard"
    assert get_font_face() == "IBM Plex Mono"
    assert get_footer_text() is None
    assert get_scale_factor() == 1.0
    assert get_custom_themes() == {}


def test_set_preference_persists(config_file) -> None:
    set_preference("theme", "githubDark")
    set_preference("scale_factor", "2")
    set_preference("footer_text", "Made with contrib-canvas")

    assert json.loads(config_file.read_text())["theme"] == "githubDark"
    assert get_theme_name() == "githubDark"
    assert get_scale_factor() == 2.0
    assert get_footer_text() == "Made with contrib-canvas"


@pytest.mark.parametrize(
    "key, value",
    [("unknown", "x"), ("scale_factor", "abc"), ("scale_factor", "0"), ("theme", "  ")],
)
def test_set_preference_rejects_invalid_values(config_file, key, value) -> None:
    with pytest.raises(ValueError):
        set_preference(key, value)

    assert not config_file.exists()


def test_corrupt_file_falls_back_to_defaults(config_file) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text("{oops", encoding="utf-8")

    assert load_config()["theme"] == "standard"


def test_unusable_scale_factor_falls_back_to_one(config_file) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text(json.dumps({"scale_factor": "-3"}), encoding="utf-8")

    assert get_scale_factor() == 1.0


def test_custom_themes_keep_known_slots_only(config_file) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        json.dumps({
            "themes": {
                "mine": {"grade4": "#ff0000", "sparkle": "#ffffff"},
                "broken": "not a mapping",
            }
        }),
        encoding="utf-8",
    )

    assert get_custom_themes() == {"mine": {"grade4": "#ff0000"}}


def test_reset_config_restores_defaults(config_file) -> None:
    set_preference("theme", "dracula")

    reset_config()

    assert get_theme_name() == "standard"

import pytest

from mdedit.runtime.config import EditorSettings, load_settings


def test_defaults_without_environment() -> None:
    settings = load_settings({})

    assert settings == EditorSettings()
    assert settings.indent_unit == "    "
    assert settings.keep_indent is False
    assert settings.tab_indent is True


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "MDEDIT_INDENT_WIDTH": "2",
            "MDEDIT_KEEP_INDENT": "yes",
            "MDEDIT_TAB_INDENT": "0",
        }
    )

    assert settings.indent_unit == "  "
    assert settings.keep_indent is True
    assert settings.tab_indent is False


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_indent_width_falls_back(raw: str) -> None:
    assert load_settings({"MDEDIT_INDENT_WIDTH": raw}).indent_width == 4


def test_settings_reject_non_positive_width() -> None:
    with pytest.raises(ValueError):
        EditorSettings(indent_width=0)

import pytest

from talos_guard.config import Settings, load_settings
from talos_guard.errors import ConfigError


def test_defaults_without_path():
    settings = load_settings(None)

    assert settings == Settings()
    assert settings.snippet_width == 60
    assert settings.format == "text"


def test_loads_yaml(tmp_path):
    config = tmp_path / "guard.yaml"
    config.write_text("format: json\ncolor: false\nsnippet_width: 80\ntimeout: 5\n", encoding="utf-8")

    settings = load_settings(config)

    assert settings.format == "json"
    assert settings.color is False
    assert settings.snippet_width == 80
    assert settings.timeout == 5.0


def test_empty_file_gives_defaults(tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")

    assert load_settings(config) == Settings()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "body, message",
    [
        ("- a\n- b\n", "mapping"),
        ("colour: true\n", "Unknown"),
        ("format: xml\n", "format"),
        ("color: maybe\n", "color"),
        ("snippet_width: 0\n", "positive"),
        ("snippet_width: wide\n", "integer"),
        ("timeout: -1\n", "positive"),
        ("format: [text\n", "Cannot read config"),
    ],
)
def test_invalid_config(tmp_path, body, message):
    config = tmp_path / "bad.yaml"
    config.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_settings(config)


def test_merge_ignores_none_and_validates():
    settings = Settings().merge(format=None, snippet_width=20)

    assert settings.format == "text"
    assert settings.snippet_width == 20
    with pytest.raises(ConfigError):
        Settings().merge(format="xml")


def test_directory_config_is_config_error(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        load_settings(tmp_path)

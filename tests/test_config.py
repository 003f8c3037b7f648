"""
Test the settings layer: defaults, environment, YAML files.
"""

import pytest

from xml_formatter.core.config import ConfigurationError, Settings, get_settings, load_settings
from xml_formatter.formatting.types import FormattingOptions


class TestSettings:
    """Test settings defaults and sources."""

    def test_defaults(self):
        settings = load_settings()

        assert settings.indent_size == 2
        assert settings.line_separator == "\n"
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.input_filename == "input.xml"
        assert settings.output_filename == "formatted.xml"
        assert settings.media_type == "application/xml"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("XML_FORMATTER_INDENT_SIZE", "4")
        monkeypatch.setenv("XML_FORMATTER_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.indent_size == 4
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_formatting_options(self):
        options = Settings(indent_size=3, line_separator="\r\n").formatting_options()

        assert options == FormattingOptions(indent_size=3, line_separator="\r\n")


class TestYamlSettings:
    """Test loading settings from YAML files."""

    def test_yaml_values_override_defaults(self, temp_directory):
        config_path = temp_directory / "settings.yaml"
        config_path.write_text('indent_size: 4\nline_separator: "\\r\\n"\nlog_format: json\n', encoding="utf-8")

        settings = load_settings(config_path)

        assert settings.indent_size == 4
        assert settings.line_separator == "\r\n"
        assert settings.log_format == "json"

    def test_empty_file_uses_defaults(self, temp_directory):
        config_path = temp_directory / "empty.yaml"
        config_path.write_text("", encoding="utf-8")

        assert load_settings(config_path).indent_size == 2

    @pytest.mark.parametrize(
        "content",
        [
            "indent_size: -1\n",
            "line_separator: ';'\n",
            "log_format: xml\n",
            "unknown_key: 1\n",
            "- just\n- a list\n",
            "indent_size: [unclosed\n",
        ],
    )
    def test_invalid_configuration(self, temp_directory, content):
        config_path = temp_directory / "bad.yaml"
        config_path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_settings(config_path)

    def test_missing_file(self, temp_directory):
        with pytest.raises(ConfigurationError):
            load_settings(temp_directory / "absent.yaml")

"""Tests for the configster command line."""

import json

from click.testing import CliRunner

from configster import __version__, get_version
from configster.cli import main


def invoke(*args):
    return CliRunner().invoke(main, list(args), catch_exceptions=False)


class TestParseCommand:

    def test_plain_output(self, sample_config_file):
        result = invoke("parse", str(sample_config_file), "--format", "plain")

        assert result.exit_code == 0
        assert "Option:'option' | value 'Blue'" in result.output
        assert "Option:'InvalidOption_on_Line4' | value ''" in result.output

    def test_json_output(self, sample_config_file):
        result = invoke("parse", str(sample_config_file), "-f", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [o["option"] for o in data["options"]] == [
            "option",
            "max_users",
            "DelayOff",
            "InvalidOption_on_Line4",
        ]

    def test_rich_output(self, sample_config_file):
        result = invoke("parse", str(sample_config_file))

        assert result.exit_code == 0
        assert "max_users" in result.output

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "semi.conf"
        path.write_text("dirs = /a ; /b\n")

        result = invoke("parse", str(path), "-d", ";", "-f", "json")

        assert json.loads(result.output)["options"][0]["value"] == {"primary": "/a", "attributes": ["/b"]}

    def test_bad_delimiter(self, sample_config_file):
        result = CliRunner().invoke(main, ["parse", str(sample_config_file), "-d", ";;"])

        assert result.exit_code == 2
        assert "single character" in result.output

    def test_strict_fails_on_invalid_line(self, sample_config_file):
        result = invoke("parse", str(sample_config_file), "--strict", "-f", "plain")

        assert result.exit_code == 1

    def test_strict_ignores_option_named_like_invalid_record(self, tmp_path):
        path = tmp_path / "prefix.conf"
        path.write_text("InvalidOption_on_Line_count = 3\n")

        result = invoke("parse", str(path), "--strict", "-f", "plain")

        assert result.exit_code == 0
        assert "Option:'InvalidOption_on_Line_count' | value '3'" in result.output

    def test_strict_passes_clean_file(self, tmp_path):
        path = tmp_path / "clean.conf"
        path.write_text("a = 1\n")

        assert invoke("parse", str(path), "--strict").exit_code == 0

    def test_missing_file(self, tmp_path):
        result = invoke("parse", str(tmp_path / "missing.conf"))

        assert result.exit_code == 2
        assert "Cannot open" in result.output

    def test_settings_file_defaults(self, isolated_settings, tmp_path):
        (isolated_settings / "settings.yaml").write_text("delimiter: '|'\noutput_format: json\n")
        path = tmp_path / "pipes.conf"
        path.write_text("k = v | a\n")

        result = invoke("parse", str(path))

        assert json.loads(result.output)["options"][0]["value"]["attributes"] == ["a"]

    def test_broken_settings_file(self, isolated_settings, sample_config_file):
        (isolated_settings / "settings.yaml").write_text("output_format: html\n")

        result = invoke("parse", str(sample_config_file))

        assert result.exit_code == 2
        assert "Error" in result.output


class TestCheckCommand:

    def test_reports_invalid_lines(self, fixture_config_file):
        result = invoke("check", str(fixture_config_file), "-f", "plain")

        assert result.exit_code == 1
        assert "InvalidOption_on_Line8" in result.output

    def test_clean_files(self, tmp_path):
        first = tmp_path / "a.conf"
        second = tmp_path / "b.conf"
        first.write_text("a = 1\n")
        second.write_text("# nothing\n")

        result = invoke("check", str(first), str(second), "-f", "plain")

        assert result.exit_code == 0
        assert result.output.count("OK:") == 2

    def test_json_output_for_several_files(self, tmp_path, fixture_config_file):
        clean = tmp_path / "clean.conf"
        clean.write_text("InvalidOption_on_Line_count = 3\n")

        result = invoke("check", str(fixture_config_file), str(clean), "-f", "json")

        assert result.exit_code == 1
        assert json.loads(result.output) == [
            {"file": str(fixture_config_file), "invalid": ["InvalidOption_on_Line8"]},
            {"file": str(clean), "invalid": []},
        ]

    def test_unreadable_file_wins(self, tmp_path, fixture_config_file):
        result = invoke("check", str(fixture_config_file), str(tmp_path / "missing.conf"))

        assert result.exit_code == 2


def test_version_command():
    result = invoke("version")

    assert result.exit_code == 0
    assert result.output.strip() == __version__
    assert get_version() == __version__


def test_version_option():
    result = invoke("--version")

    assert __version__ in result.output

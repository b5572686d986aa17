import os

import pytest
from click.testing import CliRunner

from featurescan.commands import cmd_translate
from tests.test_data.analyzer_test_data import FEATURE_DIR

GERMAN_FEATURE = os.path.join(FEATURE_DIR, "german.feature")


class TestCmdTranslate:
    """Test class for translate command functionality"""

    def setup_method(self):
        self.runner = CliRunner()

    @pytest.mark.cmd_translate
    def test_translate_german(self):
        result = self.runner.invoke(cmd_translate.cli, ["--file", GERMAN_FEATURE])

        assert result.exit_code == 0, result.output
        assert "Feature: Eine Deutsche Spezifikation" in result.output
        assert "    Given die Spezifikation ist in Deutsch geschrieben" in result.output
        assert "    When die Spezifikation zu Testomatio exportiert wird" in result.output
        assert "    Then werden die Schlüsselworte ins Englische übersetzt" in result.output
        assert "# language: de" in result.output

    @pytest.mark.cmd_translate
    def test_translate_to_output_file(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cmd_translate.cli, ["--file", GERMAN_FEATURE, "--output", "english.feature"])

            assert result.exit_code == 0
            assert "Translated feature saved to: english.feature" in result.output
            with open("english.feature", encoding="utf-8") as f:
                translated = f.read()
        with open(GERMAN_FEATURE, encoding="utf-8") as f:
            assert len(translated.split("\n")) == len(f.read().split("\n"))

    @pytest.mark.cmd_translate
    def test_translate_with_explicit_language(self):
        result = self.runner.invoke(cmd_translate.cli, ["--file", GERMAN_FEATURE, "--language", "en"])

        assert result.exit_code == 0
        assert "Angenommen die Spezifikation" in result.output

    @pytest.mark.cmd_translate
    def test_translate_unknown_language(self):
        result = self.runner.invoke(cmd_translate.cli, ["--file", GERMAN_FEATURE, "--language", "xx-unknown"])

        assert result.exit_code == 1
        assert "Language 'xx-unknown' is not a known Gherkin dialect." in result.output

    @pytest.mark.cmd_translate
    def test_translate_missing_file(self):
        result = self.runner.invoke(cmd_translate.cli, ["--file", "/nonexistent/file.feature"])
        assert result.exit_code == 2

    @pytest.mark.cmd_translate
    def test_translate_undecodable_file(self, tmp_path):
        feature_file = tmp_path / "binary.feature"
        feature_file.write_bytes(b"\xff\xfe\x00Feature")

        result = self.runner.invoke(cmd_translate.cli, ["--file", str(feature_file)])

        assert result.exit_code == 1
        assert "Error occurred while opening the file" in result.output
        assert "codec can't decode" in result.output

    @pytest.mark.cmd_translate
    def test_translate_unparsable_file_uses_language_header(self, tmp_path):
        feature_file = tmp_path / "broken.feature"
        feature_file.write_text(
            "# language: de\nAngenommen ein Schritt vor der Funktionalität\nFunktionalität: Zu spät\n",
            encoding="utf-8",
        )

        result = self.runner.invoke(cmd_translate.cli, ["--file", str(feature_file)])

        assert result.exit_code == 0, result.output
        assert "Given ein Schritt vor der Funktionalität" in result.output
        assert "Feature: Zu spät" in result.output

    @pytest.mark.cmd_translate
    def test_translate_unknown_language_header(self, tmp_path):
        feature_file = tmp_path / "unknown.feature"
        feature_file.write_text("# language: xx-unknown\nFeature: x\n", encoding="utf-8")

        result = self.runner.invoke(cmd_translate.cli, ["--file", str(feature_file)])

        assert result.exit_code == 1
        assert "names an unknown Gherkin dialect" in result.output

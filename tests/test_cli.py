"""Tests for the typer CLI."""

import json

import httpx
import pytest
from typer.testing import CliRunner

from renamr import cli
from renamr.pipeline import orchestrator as orchestrator_module

runner = CliRunner()


@pytest.fixture(autouse=True)
def offline(monkeypatch, fake_tagger, tmp_path):
    """No NLTK models, no network, no stray config.yaml."""
    monkeypatch.setattr(orchestrator_module, "NltkTagger", lambda auto_download=True: fake_tagger)
    monkeypatch.delenv("RENAMR_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


class TestSuggestCommand:
    def test_word_mode_text(self):
        result = runner.invoke(
            cli.app, ["suggest", "--words", "--no-lexicon", "-r", "2", "--seed", "3",
                      "angry", "blue", "quiet", "dog", "cat", "river"]
        )
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 2
        assert len(set(lines)) == 2
        for line in lines:
            adj, noun = line.split("_")
            assert adj in {"angry", "blue", "quiet"}
            assert noun in {"dog", "cat", "river"}

    def test_json_output(self):
        result = runner.invoke(
            cli.app, ["suggest", "-w", "--no-lexicon", "-f", "json", "-m", "NN,JJ",
                      "--separator=-", "dog", "blue"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "config": {"sources": ["dog", "blue"], "modifiers": ["NN", "JJ"]},
            "suggestions": ["dog-blue"],
        }

    def test_invalid_format_exits_nonzero(self):
        result = runner.invoke(cli.app, ["suggest", "-w", "--no-lexicon", "-f", "xml", "dog"])
        assert result.exit_code == 1

    def test_invalid_modifier_exits_nonzero(self):
        result = runner.invoke(cli.app, ["suggest", "-w", "--no-lexicon", "-m", "JJ,ZZ", "dog"])
        assert result.exit_code == 1

    def test_insufficient_variance_still_succeeds(self):
        result = runner.invoke(
            cli.app, ["suggest", "-w", "--no-lexicon", "-r", "5", "blue", "cat"]
        )
        assert result.exit_code == 0
        assert "blue_cat" in result.stdout

    def test_fetch_error_exit_code(self, monkeypatch):
        real_fetcher = cli.ReleaseNamer.__init__

        def offline_init(self, config, **kwargs):
            from renamr.sources.fetcher import SourceFetcher

            kwargs["fetcher"] = SourceFetcher(
                transport=httpx.MockTransport(lambda request: httpx.Response(500))
            )
            real_fetcher(self, config, **kwargs)

        monkeypatch.setattr(cli.ReleaseNamer, "__init__", offline_init)
        result = runner.invoke(cli.app, ["suggest", "--no-lexicon", "https://example.com"])
        assert result.exit_code == 2

    def test_list_formats(self):
        result = runner.invoke(cli.app, ["suggest", "--list-formats"])
        assert result.exit_code == 0
        for name in ("text", "csv", "json", "yaml"):
            assert name in result.stdout

    def test_list_modifiers(self):
        result = runner.invoke(cli.app, ["suggest", "-M"])
        assert result.exit_code == 0
        assert "adjective" in result.stdout
        assert "VBN" in result.stdout

    def test_variance_warning_printed_once(self):
        result = runner.invoke(
            cli.app, ["suggest", "-w", "--no-lexicon", "-r", "5", "blue", "cat"]
        )
        assert result.exit_code == 0
        assert result.output.count("Not enough") == 1

    def test_hyphenated_word_keeps_segment_count(self, fake_tagger):
        fake_tagger.table["well-known"] = "JJ"
        result = runner.invoke(
            cli.app, ["suggest", "-w", "--no-lexicon", "-s", "-", "-r", "3",
                      "well-known", "blue", "dog"]
        )
        assert result.exit_code == 0
        assert "blue-dog" in result.stdout
        assert "well-known" not in result.stdout

    def test_letter_separator_rejected(self):
        result = runner.invoke(cli.app, ["suggest", "-w", "--no-lexicon", "-s", "x", "dog"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestConfigErrors:
    def test_out_of_range_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text("generator:\n  retry_factor: 0\n")
        result = runner.invoke(cli.app, ["suggest", "-w", "--no-lexicon", "blue", "dog"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "retry_factor" in result.output
        assert "Traceback" not in result.output

    def test_malformed_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text("generator: [unclosed\n")
        result = runner.invoke(cli.app, ["suggest", "-w", "--no-lexicon", "blue", "dog"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_config_key(self, tmp_path):
        bad = tmp_path / "other.yaml"
        bad.write_text("output:\n  colour: red\n")
        result = runner.invoke(
            cli.app, ["suggest", "-c", str(bad), "-w", "--no-lexicon", "blue", "dog"]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_wordlist(self, tmp_path):
        (tmp_path / "config.yaml").write_text("lexicon:\n  wordlist_path: missing.txt\n")
        result = runner.invoke(cli.app, ["suggest", "-w", "blue", "dog"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "missing.txt" in result.output


class TestDefaultCommand:
    def test_arguments_without_command(self):
        result = runner.invoke(cli.app, ["-w", "--no-lexicon", "dog", "blue"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "blue_dog"

    def test_link_without_command(self, monkeypatch, html_fetcher):
        real_init = cli.ReleaseNamer.__init__

        def offline_init(self, config, **kwargs):
            kwargs["fetcher"] = html_fetcher
            real_init(self, config, **kwargs)

        monkeypatch.setattr(cli.ReleaseNamer, "__init__", offline_init)
        result = runner.invoke(cli.app, ["--no-lexicon", "https://example.com"])
        assert result.exit_code == 0
        adj, noun = result.stdout.strip().split("_")
        assert adj in {"angry", "blue", "quiet"}
        assert noun in {"dog", "cat", "river"}

    def test_bare_invocation_uses_default_links(self, monkeypatch, html_fetcher, tmp_path):
        (tmp_path / "config.yaml").write_text("lexicon:\n  enabled: false\n")
        requested = []
        real_init = cli.ReleaseNamer.__init__

        def offline_init(self, config, **kwargs):
            kwargs["fetcher"] = html_fetcher
            real_init(self, config, **kwargs)

        monkeypatch.setattr(cli.ReleaseNamer, "__init__", offline_init)
        real_fetch = html_fetcher.fetch

        def recording_fetch(url):
            requested.append(url)
            return real_fetch(url)

        monkeypatch.setattr(html_fetcher, "fetch", recording_fetch)
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 0
        assert len(result.stdout.strip().split("_")) == 2
        assert len(requested) == 4

    def test_help_lists_commands(self):
        result = runner.invoke(cli.app, ["--help"])
        assert result.exit_code == 0
        assert "suggest" in result.stdout
        assert "formats" in result.stdout


class TestListingCommands:
    def test_formats(self):
        result = runner.invoke(cli.app, ["formats"])
        assert result.exit_code == 0
        assert "yaml" in result.stdout

    def test_modifiers(self):
        result = runner.invoke(cli.app, ["modifiers"])
        assert result.exit_code == 0
        assert "interjection" in result.stdout

    def test_version(self):
        result = runner.invoke(cli.app, ["version"])
        assert result.exit_code == 0
        assert "renamr" in result.stdout

"""
Tests for the command line entry point.
"""

import io
import json

import pytest

from text_integrity import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the package logger during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_global_options(self):
        args = cli.build_parser().parse_args(["--json", "--strict", "scan", "hello"])
        assert args.json
        assert args.strict
        assert args.command == "scan"
        assert args.text == "hello"

    def test_title_only_for_check(self):
        args = cli.build_parser().parse_args(["check", "--title", "Meeting", "body"])
        assert args.title == "Meeting"
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["scan", "--title", "Meeting", "body"])


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestCommands:
    def test_scan(self, capsys):
        assert cli.main(["scan", "fuck"]) == cli.EXIT_OK
        out = capsys.readouterr().out
        assert "Profanity: yes" in out
        assert "fuck" in out

    def test_scan_clean(self, capsys):
        assert cli.main(["scan", "Good morning everyone."]) == cli.EXIT_OK
        assert "Profanity: no" in capsys.readouterr().out

    def test_strict_exit_code(self):
        assert cli.main(["--strict", "scan", "fuck"]) == cli.EXIT_FINDINGS
        assert cli.main(["--strict", "scan", "Good morning everyone."]) == cli.EXIT_OK

    def test_scan_json(self, capsys):
        cli.main(["--json", "scan", "gago ka, fuck"])
        data = json.loads(capsys.readouterr().out)
        assert data["has_profanity"] is True
        assert data["language"] == "mixed"

    def test_censor(self, capsys):
        cli.main(["censor", "fuck"])
        assert capsys.readouterr().out.strip() == "****"

    def test_severity(self, capsys):
        assert cli.main(["--strict", "severity", "Good morning everyone."]) == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == "none"

    def test_check_json(self, capsys):
        assert cli.main(["--json", "check", "--title", "Meeting", "Teh."]) == cli.EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["quality_score"] == 85
        assert data["summary"]["status"] == "needs_attention"

    def test_check_text_output(self, capsys):
        cli.main(["check", "Teh."])
        out = capsys.readouterr().out
        assert "Quality score: 85/100 (needs_attention)" in out
        assert "(suggestion: the)" in out

    def test_spell_no_issues(self, capsys):
        cli.main(["spell", "The dog is gone."])
        assert capsys.readouterr().out.strip() == "No issues found."

    def test_grammar_strict(self, capsys):
        assert cli.main(["--strict", "grammar", "You should of known."]) == cli.EXIT_FINDINGS
        assert "should have" in capsys.readouterr().out

    def test_autocorrect_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("teh dog should of gone"))
        cli.main(["autocorrect"])
        assert capsys.readouterr().out.strip() == "the dog should have gone"

    def test_autocorrect_verbose_lists_changes(self, capsys):
        cli.main(["--verbose", "autocorrect", "teh dog"])
        out = capsys.readouterr().out
        assert "teh -> the (spelling)" in out

    def test_read_from_file(self, capsys, tmp_path):
        path = tmp_path / "post.txt"
        path.write_text("gago", encoding="utf-8")
        cli.main(["censor", "--file", str(path)])
        assert capsys.readouterr().out.strip() == "****"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_missing_file(self, capsys, tmp_path):
        code = cli.main(["scan", "--file", str(tmp_path / "missing.txt")])
        assert code == cli.EXIT_ERROR
        assert "could not be found" in capsys.readouterr().err

    def test_bad_config(self, capsys, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("profanity: [unclosed\n", encoding="utf-8")

        code = cli.main(["--config", str(config), "scan", "hello"])

        assert code == cli.EXIT_ERROR
        assert "Settings file error" in capsys.readouterr().err

    def test_bad_mask_char(self, capsys, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text('profanity:\n  mask_char: "@"\n', encoding="utf-8")

        assert cli.main(["--config", str(config), "censor", "hello"]) == cli.EXIT_ERROR
        assert "Settings file error" in capsys.readouterr().err

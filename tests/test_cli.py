"""Tests for complexity_gate.cli: argument handling and exit codes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from complexity_gate import cli

from conftest import FakeProvider, reply

SCENARIO_REPLIES = (
    reply(1, "one for loop", "loops"),
    reply(1, "one if", "conditionals"),
)


@pytest.fixture(autouse=True)
def _no_real_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("real provider must not be built in tests")

    monkeypatch.setattr(cli.GroqProvider, "from_settings", fail)


class TestArguments:
    @pytest.mark.parametrize("argv", [[], ["code.c"], ["code.c", "rules.json"]])
    def test_fewer_than_three_args_exits_1(self, argv, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv, provider=FakeProvider())
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_no_file_access_on_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(path):
            raise AssertionError("file accessed")

        monkeypatch.setattr(cli, "read_code_file", boom)
        monkeypatch.setattr(cli, "read_complexity_rules", boom)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["code.c", "rules.json"], provider=FakeProvider())
        assert exc_info.value.code == 1

    def test_non_numeric_limit_exits_1(self, code_file: Path, rules_file: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(code_file), str(rules_file), "ten"], provider=FakeProvider())
        assert exc_info.value.code == 1
        assert "limit must be a number" in capsys.readouterr().err

    @pytest.mark.parametrize(("raw", "expected"), [("2", 2), ("-1", -1), ("2.5", 2.5)])
    def test_parse_limit(self, raw: str, expected) -> None:
        value = cli.parse_limit(raw)
        assert value == expected
        assert type(value) is type(expected)


class TestRun:
    def test_scenario_within_limit(self, code_file: Path, rules_file: Path, capsys) -> None:
        code = cli.main([str(code_file), str(rules_file), "2"], provider=FakeProvider(*SCENARIO_REPLIES))
        out = capsys.readouterr().out

        assert code == 0
        assert "Code loaded successfully." in out
        assert "Final Complexity Count: 2" in out
        assert "Is within complexity limit? True" in out

    def test_limit_exceeded_still_exits_0(self, code_file: Path, rules_file: Path, capsys) -> None:
        code = cli.main([str(code_file), str(rules_file), "1"], provider=FakeProvider(*SCENARIO_REPLIES))
        out = capsys.readouterr().out

        assert code == 0
        assert "Is within complexity limit? False" in out

    def test_per_rule_failure_still_reports(self, code_file: Path, rules_file: Path, capsys) -> None:
        provider = FakeProvider(reply(1, "one for loop", "loops"), "garbage")
        code = cli.main([str(code_file), str(rules_file), "5"], provider=provider)
        out = capsys.readouterr().out

        assert code == 0
        assert "Final Complexity Count: 1" in out
        assert "Rules evaluated: 1, skipped: 1" in out

    def test_missing_code_file_exits_1(self, tmp_path: Path, rules_file: Path, capsys) -> None:
        provider = FakeProvider(*SCENARIO_REPLIES)
        code = cli.main([str(tmp_path / "missing.c"), str(rules_file), "2"], provider=provider)
        captured = capsys.readouterr()

        assert code == 1
        assert "Error: Code file not found" in captured.err
        assert "Analysis Summary:" not in captured.out
        assert provider.prompts == []

    def test_missing_rules_file_exits_1(self, code_file: Path, tmp_path: Path, capsys) -> None:
        code = cli.main([str(code_file), str(tmp_path / "rules.json"), "2"], provider=FakeProvider())
        captured = capsys.readouterr()

        assert code == 1
        assert "Analysis Summary:" not in captured.out

    def test_malformed_rules_file_exits_1(self, code_file: Path, tmp_path: Path, capsys) -> None:
        rules = tmp_path / "rules.json"
        rules.write_text(json.dumps({"rules": []}), encoding="utf-8")
        code = cli.main([str(code_file), str(rules), "2"], provider=FakeProvider())
        captured = capsys.readouterr()

        assert code == 1
        assert "Malformed complexity rules file" in captured.err
        assert "Analysis Summary:" not in captured.out

    def test_provider_error_is_skipped_not_fatal(self, code_file: Path, rules_file: Path, capsys) -> None:
        provider = FakeProvider(RuntimeError("boom"), reply(1, "one if", "conditionals"))
        code = cli.main([str(code_file), str(rules_file), "2"], provider=provider)
        out = capsys.readouterr().out

        assert code == 0
        assert "Rules evaluated: 1, skipped: 1" in out
        assert "Final Complexity Count: 1" in out

    def test_uncaught_error_exits_1(self, code_file: Path, rules_file: Path, capsys) -> None:
        class BrokenReporter(cli.ConsoleReporter):
            def summary(self, summary) -> None:
                raise RuntimeError("boom")

        code = cli.main(
            [str(code_file), str(rules_file), "2"],
            provider=FakeProvider(*SCENARIO_REPLIES),
            reporter=BrokenReporter(),
        )
        captured = capsys.readouterr()

        assert code == 1
        assert "Error: boom" in captured.err

    def test_extra_arguments_are_ignored(self, code_file: Path, rules_file: Path, capsys) -> None:
        code = cli.main(
            [str(code_file), str(rules_file), "2", "extra"],
            provider=FakeProvider(*SCENARIO_REPLIES),
        )
        out = capsys.readouterr().out

        assert code == 0
        assert "Final Complexity Count: 2" in out

    def test_invalid_settings_exit_1(
        self, code_file: Path, rules_file: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "info-ish")
        cli.get_settings.cache_clear()
        try:
            code = cli.main([str(code_file), str(rules_file), "2"], provider=FakeProvider(*SCENARIO_REPLIES))
        finally:
            cli.get_settings.cache_clear()
        captured = capsys.readouterr()

        assert code == 1
        assert captured.err.startswith("Error: ")
        assert "Analysis Summary:" not in captured.out

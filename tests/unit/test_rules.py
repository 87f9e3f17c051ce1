"""
Rules loading tests.

Verifies that calculator_rules.yaml loads, defaults apply and
schema violations fail with a clear message.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from src.components.arithmetic import ArithmeticConfig
from src.rules.loader import (
    load_rules,
    load_rules_or_default,
    resolve_log_level,
    rules_path_from_env,
)
from src.rules.models import Rules


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent.parent


class TestRulesLoading:
    def test_load_project_rules_file(self, project_root: Path) -> None:
        rules = load_rules(project_root / "calculator_rules.yaml")

        assert rules.arithmetic.to_config() == ArithmeticConfig()
        assert rules.display.title == "Calculator"

    def test_empty_file_gives_defaults(self, write_rules: Callable[[str], Path]) -> None:
        assert load_rules(write_rules("")) == Rules()

    def test_partial_file_keeps_other_defaults(
        self, write_rules: Callable[[str], Path]
    ) -> None:
        rules = load_rules(write_rules("arithmetic:\n  division_scale: 4\n"))

        assert rules.arithmetic.division_scale == 4
        assert rules.arithmetic.rounding == "half_up"
        assert rules.logging.level == "INFO"

    def test_markdown_fenced_yaml(self, write_rules: Callable[[str], Path]) -> None:
        content = "# Rules\n\n```yaml\ndisplay:\n  theme: light\n```\n\nNotes here.\n"

        assert load_rules(write_rules(content)).display.theme == "light"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "nope.yaml") == Rules()


class TestRulesValidation:
    def test_invalid_yaml(self, write_rules: Callable[[str], Path]) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("arithmetic: [unclosed\n"))

    @pytest.mark.parametrize(
        "content",
        [
            "arithmetic:\n  division_scale: -1\n",
            "arithmetic:\n  division_scale: 51\n",
            "arithmetic:\n  rounding: ceiling\n",
            "arithmetic:\n  precision: 3\n",
            "display:\n  theme: neon\n",
            "logging:\n  level: LOUD\n",
        ],
    )
    def test_schema_violations(
        self, write_rules: Callable[[str], Path], content: str
    ) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(content))


class TestEnvironment:
    def test_rules_path_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALC_RULES_PATH", "/etc/calc.yaml")
        assert rules_path_from_env() == Path("/etc/calc.yaml")

    def test_rules_path_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CALC_RULES_PATH", raising=False)
        assert rules_path_from_env() == Path("calculator_rules.yaml")

    def test_log_level_env_overrides_rules(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
        assert resolve_log_level(Rules()) == "DEBUG"

    def test_log_level_from_rules(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CALC_LOG_LEVEL", raising=False)
        rules = Rules.model_validate({"logging": {"level": "WARNING"}})
        assert resolve_log_level(rules) == "WARNING"

    def test_unknown_log_level_env_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CALC_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Rules validation failed"):
            resolve_log_level(Rules())

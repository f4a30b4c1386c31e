"""
Тесты для vote-odds CLI

Проверяет:
1. Позиционные аргументы (0 или 4) и интерактивный ввод
2. JSON запрос и JSON вывод
3. Игровые ограничения и --allow-out-of-range
4. Коды выхода при ошибках (1 — ошибка данных, 2 — ошибка использования)
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from vote_odds.cli import app


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def weights_csv(tmp_path: Path) -> Path:
    path = tmp_path / "weights.csv"
    path.write_text("a,1\nb,2\nc,3\nd,4\n", encoding="utf-8")
    return path


def _output_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


# =============================================================================
# ТЕСТЫ: Успешные вычисления
# =============================================================================


class TestCalculate:
    """Вычисление через аргументы, ввод и JSON запрос."""

    def test_positional_arguments(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv), "a", "50", "30", "1"])

        assert result.exit_code == 0, result.output
        lines = _output_lines(result.output)
        assert lines[-2] == "Exact probability:"
        assert lines[-1] == "393/5600"

    def test_interactive_prompts(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv)], input="a\n50\n30\n1\n")

        assert result.exit_code == 0, result.output
        assert "What is the ID of the vote you want the probability for?" in result.output
        assert "What is the current new vote extra effect max count?" in result.output
        assert _output_lines(result.output)[-1] == "393/5600"

    def test_no_cache_same_result(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(
            app, ["--weights", str(weights_csv), "--no-cache", "a", "50", "30", "1"]
        )
        assert result.exit_code == 0, result.output
        assert _output_lines(result.output)[-1] == "393/5600"

    def test_json_output(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(
            app, ["--weights", str(weights_csv), "--json", "a", "50", "30", "1"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["vote_id"] == "a"
        assert payload["probability"] == "393/5600"
        assert payload["numerator"] == "393"
        assert payload["denominator"] == "5600"
        assert payload["max_extra_rounds"] == 1

    def test_request_file(self, runner: CliRunner, weights_csv: Path, tmp_path: Path) -> None:
        request = tmp_path / "query.json"
        request.write_text(
            json.dumps(
                {
                    "vote_id": "d",
                    "discard_chance_percent": 50,
                    "continuation_chance_percent": 30,
                    "max_extra_rounds": 0,
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(
            app, ["--weights", str(weights_csv), "--request", str(request)]
        )
        assert result.exit_code == 0, result.output
        assert _output_lines(result.output)[-1] == "1/5"

    def test_allow_out_of_range(self, runner: CliRunner, weights_csv: Path) -> None:
        """90% repeal вне игрового диапазона, но вычисляется по запросу."""
        result = runner.invoke(
            app,
            ["--weights", str(weights_csv), "--allow-out-of-range", "a", "90", "30", "1"],
        )
        assert result.exit_code == 0, result.output
        assert _output_lines(result.output)[-1] == "393/28000"


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestErrors:
    """Коды выхода и сообщения об ошибках."""

    @pytest.mark.parametrize("args", [["a"], ["a", "50"], ["a", "50", "30", "1", "extra"]])
    def test_wrong_argument_count(
        self, runner: CliRunner, weights_csv: Path, args: list[str]
    ) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv), *args])
        assert result.exit_code == 2

    def test_non_integer_argument(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv), "a", "half", "30", "1"])
        assert result.exit_code == 2

    def test_out_of_range_rejected(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv), "a", "90", "30", "1"])
        assert result.exit_code == 2

    def test_unknown_vote_id(self, runner: CliRunner, weights_csv: Path) -> None:
        result = runner.invoke(app, ["--weights", str(weights_csv), "zzz", "50", "30", "1"])
        assert result.exit_code == 1
        assert "Vote ID zzz does not exist." in result.output

    def test_missing_weights_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--weights", str(tmp_path / "missing.csv"), "a", "50", "30", "1"]
        )
        assert result.exit_code == 1
        assert "weights file not found" in result.output

    def test_malformed_weights_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,1\nb,-2\n", encoding="utf-8")

        result = runner.invoke(app, ["--weights", str(path), "a", "50", "30", "1"])
        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_invalid_request_file(
        self, runner: CliRunner, weights_csv: Path, tmp_path: Path
    ) -> None:
        request = tmp_path / "query.json"
        request.write_text(json.dumps({"vote_id": "a"}), encoding="utf-8")

        result = runner.invoke(
            app, ["--weights", str(weights_csv), "--request", str(request)]
        )
        assert result.exit_code == 2

    def test_request_with_positional_args(
        self, runner: CliRunner, weights_csv: Path, tmp_path: Path
    ) -> None:
        request = tmp_path / "query.json"
        request.write_text("{}", encoding="utf-8")

        result = runner.invoke(
            app,
            ["--weights", str(weights_csv), "--request", str(request), "a", "50", "30", "1"],
        )
        assert result.exit_code == 2

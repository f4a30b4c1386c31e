"""
vote-odds CLI

Точная вероятность того, что голосование появится в следующем голосовании
(снапшот 23w13a_or_b). Вероятность зависит от значений мира
new_vote_repeal_vote_chance, new_vote_extra_effect_chance и
new_vote_extra_effect_max_count, а также от весов голосований в CSV.

Использование:
    vote-odds                          # интерактивный ввод четырёх значений
    vote-odds <vote_id> <repeal_chance> <extra_effect_chance> <extra_effect_max_count>
    vote-odds --request query.json --json
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import jsonschema
import typer
from pydantic import ValidationError

from vote_odds.config import (
    DEFAULT_WEIGHTS_CSV_PATH,
    MAX_EXTRA_ROUNDS_PRACTICAL_CEILING,
    CalculatorConfig,
)
from vote_odds.core.contracts import validate_probability_request, validate_probability_result
from vote_odds.core.domain import ProbabilityResult, UnknownVoteId, VoteQuery
from vote_odds.data import WeightTableFormatError, load_weight_table
from vote_odds.engine import evaluate_query

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

ARGS_USAGE = (
    "The arguments should be: <vote_id> <new_vote_repeal_vote_chance> "
    "<new_vote_extra_effect_chance> <new_vote_extra_effect_max_count>"
)


# =============================================================================
# INPUT
# =============================================================================


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise typer.BadParameter(f"{name} must be an integer, got {value!r}") from None


def _query_from_args(args: List[str]) -> dict:
    if len(args) != 4:
        raise typer.BadParameter(
            f"Invalid number of arguments ({len(args)}). Argument length must be 0 or 4. "
            f"Leave args length as 0 for user prompts. {ARGS_USAGE}"
        )

    vote_id, repeal, extra_chance, extra_max = args
    return {
        "vote_id": vote_id,
        "discard_chance_percent": _parse_int(repeal, "new_vote_repeal_vote_chance"),
        "continuation_chance_percent": _parse_int(extra_chance, "new_vote_extra_effect_chance"),
        "max_extra_rounds": _parse_int(extra_max, "new_vote_extra_effect_max_count"),
    }


def _query_from_prompts() -> dict:
    vote_id = typer.prompt("What is the ID of the vote you want the probability for?")
    repeal = typer.prompt("What is the current repeal percentage?", type=int)
    extra_chance = typer.prompt("What is the current new vote extra effect percentage?", type=int)
    extra_max = typer.prompt("What is the current new vote extra effect max count?", type=int)
    return {
        "vote_id": vote_id,
        "discard_chance_percent": repeal,
        "continuation_chance_percent": extra_chance,
        "max_extra_rounds": extra_max,
    }


def _query_from_request(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise typer.BadParameter(f"request file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"request file is not valid JSON: {e}") from e

    try:
        validate_probability_request(data)
    except jsonschema.ValidationError as e:
        raise typer.BadParameter(f"invalid request: {e.message}") from e
    return data


def _build_query(raw: dict) -> VoteQuery:
    try:
        return VoteQuery(**raw)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


# =============================================================================
# COMMAND
# =============================================================================


@app.command()
def main(
    args: Optional[List[str]] = typer.Argument(
        None,
        help="<vote_id> <repeal_chance> <extra_effect_chance> <extra_effect_max_count>",
        show_default=False,
    ),
    weights: Path = typer.Option(
        Path(DEFAULT_WEIGHTS_CSV_PATH), "--weights", "-w", help="CSV file with vote_id,weight rows"
    ),
    request: Optional[Path] = typer.Option(
        None, "--request", help="JSON file with the computation parameters"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    allow_out_of_range: bool = typer.Option(
        False, "--allow-out-of-range", help="Skip the game limits check of the parameters"
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Disable memoization"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Print the exact probability that a vote appears in the next vote."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = CalculatorConfig(weights_csv_path=str(weights), use_cache=not no_cache)

    try:
        table = load_weight_table(config.weights_csv_path)
    except FileNotFoundError:
        _fail(f"weights file not found: {config.weights_csv_path}")
    except WeightTableFormatError as e:
        _fail(str(e))

    if request is not None:
        if args:
            raise typer.BadParameter("positional arguments cannot be combined with --request")
        raw = _query_from_request(request)
    elif args:
        raw = _query_from_args(args)
    else:
        raw = _query_from_prompts()

    query = _build_query(raw)

    if not allow_out_of_range:
        violations = config.limits.check(query)
        if violations:
            raise typer.BadParameter(
                "; ".join(violations) + " (use --allow-out-of-range to compute anyway)"
            )

    if query.max_extra_rounds > MAX_EXTRA_ROUNDS_PRACTICAL_CEILING:
        logger.warning(
            "max_extra_rounds=%d exceeds %d; computation may take very long",
            query.max_extra_rounds,
            MAX_EXTRA_ROUNDS_PRACTICAL_CEILING,
        )

    try:
        value = evaluate_query(table, query, use_cache=config.use_cache)
    except UnknownVoteId as e:
        _fail(str(e))

    if json_output:
        result = ProbabilityResult.from_rational(query, value)
        payload = result.model_dump()
        validate_probability_result(payload)
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo("Exact probability:")
        typer.echo(value.to_string())

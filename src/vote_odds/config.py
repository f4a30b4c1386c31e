"""
Конфигурация калькулятора

Игровые ограничения параметров мира и пути по умолчанию.

Ядро (ExactRational, ProbabilityEngine) диапазоны НЕ проверяет: значение
вне диапазона даёт математически корректную, но игрово бессмысленную дробь.
Проверку выполняет вызывающий код (CLI) через GameLimits.check().
"""

from dataclasses import dataclass, field
from typing import Final

from vote_odds.core.domain.vote_query import VoteQuery


# =============================================================================
# CONSTANTS
# =============================================================================

# CSV с весами голосований в формате: vote_id,100
DEFAULT_WEIGHTS_CSV_PATH: Final[str] = "23w13a_or_b_vote_weights.csv"

# Выше ~12 дополнительных шагов вычисление непрактично (рост числа состояний)
MAX_EXTRA_ROUNDS_PRACTICAL_CEILING: Final[int] = 12


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GameLimits:
    """Игровые границы параметров.

    - new_vote_repeal_vote_chance: 20..80 %
    - new_vote_extra_effect_chance: 0..80 %
    - new_vote_extra_effect_max_count: 0..5
    """

    discard_percent_min: int = 20
    discard_percent_max: int = 80

    continuation_percent_min: int = 0
    continuation_percent_max: int = 80

    max_extra_rounds_min: int = 0
    max_extra_rounds_max: int = 5

    def check(self, query: VoteQuery) -> list[str]:
        """Список нарушений; пустой, если параметры в игровых границах."""
        violations: list[str] = []

        if not self.discard_percent_min <= query.discard_chance_percent <= self.discard_percent_max:
            violations.append(
                f"repeal chance {query.discard_chance_percent}% outside "
                f"[{self.discard_percent_min}, {self.discard_percent_max}]"
            )

        if not (
            self.continuation_percent_min
            <= query.continuation_chance_percent
            <= self.continuation_percent_max
        ):
            violations.append(
                f"extra effect chance {query.continuation_chance_percent}% outside "
                f"[{self.continuation_percent_min}, {self.continuation_percent_max}]"
            )

        if not self.max_extra_rounds_min <= query.max_extra_rounds <= self.max_extra_rounds_max:
            violations.append(
                f"extra effect max count {query.max_extra_rounds} outside "
                f"[{self.max_extra_rounds_min}, {self.max_extra_rounds_max}]"
            )

        return violations


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    weights_csv_path: str = DEFAULT_WEIGHTS_CSV_PATH
    limits: GameLimits = field(default_factory=GameLimits)
    use_cache: bool = True

"""
VoteQuery / ProbabilityResult — Запрос и результат вычисления

Immutable Pydantic модели границы системы:
- VoteQuery: какой голос и при каких параметрах мира
- ProbabilityResult: точная дробь + эхо параметров запроса

Диапазоны процентов здесь НЕ проверяются: это ответственность вызывающего
кода (см. vote_odds.config.GameLimits).
"""

from pydantic import BaseModel, Field

from vote_odds.core.math.rational import ExactRational


class VoteQuery(BaseModel):
    """
    Параметры вычисления вероятности.

    Соответствует игровым правилам:
    - discard_chance_percent — new_vote_repeal_vote_chance
    - continuation_chance_percent — new_vote_extra_effect_chance
    - max_extra_rounds — new_vote_extra_effect_max_count
    """

    vote_id: str = Field(..., min_length=1, description="ID голосования")
    discard_chance_percent: int = Field(..., description="Шанс repeal-голосования (%)")
    continuation_chance_percent: int = Field(
        ..., description="Шанс дополнительного эффекта на каждом шаге (%)"
    )
    max_extra_rounds: int = Field(
        ..., ge=0, description="Максимум дополнительных эффектов в комбинированном голосовании"
    )

    model_config = {"frozen": True}

    def discard_chance(self) -> ExactRational:
        return ExactRational.from_percent(self.discard_chance_percent)

    def continuation_chance(self) -> ExactRational:
        return ExactRational.from_percent(self.continuation_chance_percent)


class ProbabilityResult(BaseModel):
    """
    Результат вычисления.

    numerator/denominator хранятся строками: результат может содержать
    сотни десятичных цифр.
    """

    vote_id: str = Field(..., min_length=1)
    discard_chance_percent: int
    continuation_chance_percent: int
    max_extra_rounds: int = Field(..., ge=0)

    numerator: str = Field(..., pattern=r"^-?[0-9]+$")
    denominator: str = Field(..., pattern=r"^[1-9][0-9]*$")
    probability: str = Field(..., description="Дробь в виде 'n/d' или 'n'")

    model_config = {"frozen": True}

    @classmethod
    def from_rational(cls, query: VoteQuery, value: ExactRational) -> "ProbabilityResult":
        return cls(
            vote_id=query.vote_id,
            discard_chance_percent=query.discard_chance_percent,
            continuation_chance_percent=query.continuation_chance_percent,
            max_extra_rounds=query.max_extra_rounds,
            numerator=str(value.numerator),
            denominator=str(value.denominator),
            probability=value.to_string(),
        )

    def to_rational(self) -> ExactRational:
        return ExactRational(int(self.numerator), int(self.denominator))

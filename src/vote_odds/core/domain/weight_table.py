"""
WeightTable — Таблица весов голосований

Immutable Pydantic модель: vote_id → положительный целый вес.
Загружается один раз и не меняется на протяжении вычисления.

Вес определяет относительную вероятность выбора голосования:
P(vote) = weight(vote) / Σ weights
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownVoteId(KeyError):
    """
    Запрошенный vote_id отсутствует в таблице весов.

    Фатально для запрошенного вычисления, восстановление не выполняется.
    """

    def __init__(self, vote_id: str):
        super().__init__(vote_id)
        self.vote_id = vote_id

    def __str__(self) -> str:
        return f"Vote ID {self.vote_id} does not exist."


# =============================================================================
# WEIGHT TABLE
# =============================================================================


class WeightTable(BaseModel):
    """
    Таблица весов голосований.

    Инварианты:
    - таблица непустая
    - каждый vote_id — непустая строка (регистр значим)
    - каждый вес — целое число > 0 (произвольной точности)

    Порядок вставки сохраняется: пул кандидатов строится в этом порядке.
    """

    weights: dict[str, int] = Field(..., description="vote_id → вес")

    model_config = {"frozen": True}

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: dict[str, int]) -> dict[str, int]:
        """Проверка непустоты таблицы, id и положительности весов"""
        if not v:
            raise ValueError("weight table must contain at least one vote")

        for vote_id, weight in v.items():
            if not vote_id:
                raise ValueError("vote id must be a non-empty string")
            if weight <= 0:
                raise ValueError(f"weight of {vote_id!r} must be positive, got {weight}")

        return v

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, vote_id: object) -> bool:
        return vote_id in self.weights

    def vote_ids(self) -> list[str]:
        return list(self.weights)

    def weight_of(self, vote_id: str) -> int:
        """
        Вес голосования.

        Raises:
            UnknownVoteId: если vote_id отсутствует в таблице
        """
        try:
            return self.weights[vote_id]
        except KeyError:
            raise UnknownVoteId(vote_id) from None

    def total_weight(self) -> int:
        return sum(self.weights.values())

    def pool_without(self, vote_id: str) -> tuple[int, ...]:
        """
        Пул кандидатов: веса всех голосований, кроме vote_id.

        Удаляется ровно одна запись (выбранное голосование), даже если у
        других голосований тот же вес.

        Raises:
            UnknownVoteId: если vote_id отсутствует в таблице
        """
        if vote_id not in self.weights:
            raise UnknownVoteId(vote_id)

        return tuple(weight for other_id, weight in self.weights.items() if other_id != vote_id)

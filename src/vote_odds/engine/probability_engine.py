"""
ProbabilityEngine — точная вероятность появления голосования

Модель игровой механики:
1. Из взвешенного пула выбирается одно голосование.
2. С вероятностью continuation_chance к результату добавляется ещё одно
   голосование из ОСТАВШЕГОСЯ пула (уже выбранные исключены), и так далее,
   не более max_extra_rounds дополнительных шагов.
3. Независимо от цепочки весь результат с вероятностью discard_chance
   заменяется repeal-голосованием.

ФОРМУЛЫ:
    total = Σ pool + w_event
    P(pool, k) = w_event / total
               + [k > 1] · Σ_i  c · (w_i / total) · P(pool \\ {i}, k - 1)

    P_overall = P(pool_0, max_extra_rounds + 1) · (1 - discard_chance)

МЕМОИЗАЦИЯ:
Число ветвей растёт комбинаторно с длиной цепочки. Дальнейшие вероятности
зависят только от w_event и мультимножества ОСТАВШИХСЯ значений весов, поэтому
ключ кэша — мультимножество удалённых значений (RemovalMultiset), без учёта
порядка пула и идентичности голосований.

Кэш живёт в пределах одного вычисления (одного публичного вызова) и
сбрасывается в начале следующего.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from vote_odds.core.domain.vote_query import VoteQuery
from vote_odds.core.domain.weight_table import WeightTable
from vote_odds.core.math.rational import ONE, ExactRational
from vote_odds.engine.removal_multiset import EMPTY_REMOVALS, RemovalMultiset

logger = logging.getLogger(__name__)


# =============================================================================
# STATS
# =============================================================================


@dataclass(frozen=True)
class EngineStats:
    """Диагностика последнего вычисления."""

    states_computed: int  # Число уникальных RemovalMultiset (записей кэша)
    cache_hits: int  # Сколько раз ветвь была взята из кэша
    cache_enabled: bool


# =============================================================================
# ENGINE
# =============================================================================


class ProbabilityEngine:
    """
    Рекурсивный мемоизированный расчёт вероятности включения голосования.

    Состояние на одно вычисление:
    - weight_table: неизменяемая таблица весов
    - continuation_chance: вероятность дополнительного шага
    - кэш RemovalMultiset → ExactRational (запись один раз на ключ)

    Экземпляр не предназначен для совместного использования между потоками.
    """

    def __init__(
        self,
        weight_table: WeightTable,
        continuation_chance: ExactRational,
        use_cache: bool = True,
    ):
        """Инициализация движка.

        Args:
            weight_table: таблица весов
            continuation_chance: шанс дополнительного голосования на каждом шаге
            use_cache: False отключает мемоизацию (результат не меняется)
        """
        self.weight_table = weight_table
        self.continuation_chance = continuation_chance
        self.use_cache = use_cache

        self._cache: dict[RemovalMultiset, ExactRational] = {}
        self._cache_hits = 0
        self._states_computed = 0

    @property
    def stats(self) -> EngineStats:
        return EngineStats(
            states_computed=self._states_computed,
            cache_hits=self._cache_hits,
            cache_enabled=self.use_cache,
        )

    def clear_cache(self) -> None:
        self._cache.clear()
        self._cache_hits = 0
        self._states_computed = 0

    # -------------------------------------------------------------------------
    # Вероятность включения
    # -------------------------------------------------------------------------

    def inclusion_probability(
        self,
        event_weight: int,
        pool: Sequence[int],
        removal_history: RemovalMultiset = EMPTY_REMOVALS,
        rounds_remaining: int = 1,
    ) -> ExactRational:
        """
        Вероятность того, что событие с весом event_weight попадёт в цепочку.

        Каждый вызов — отдельное вычисление: кэш сбрасывается.

        Args:
            event_weight: вес интересующего голосования (> 0), НЕ входит в pool
            pool: веса остальных доступных голосований (дубликаты допустимы)
            removal_history: веса, уже удалённые вдоль текущей ветви
            rounds_remaining: сколько шагов цепочки ещё возможно (>= 1)

        Returns:
            Точная вероятность включения

        Raises:
            ValueError: если rounds_remaining < 1
        """
        if rounds_remaining < 1:
            raise ValueError(f"rounds_remaining must be >= 1, got {rounds_remaining}")

        self.clear_cache()
        return self._inclusion(event_weight, tuple(pool), removal_history, rounds_remaining)

    def _inclusion(
        self,
        event_weight: int,
        pool: tuple[int, ...],
        removal_history: RemovalMultiset,
        rounds_remaining: int,
    ) -> ExactRational:
        if self.use_cache:
            cached = self._cache.get(removal_history)
            if cached is not None:
                self._cache_hits += 1
                return cached

        total = sum(pool) + event_weight

        # Шанс, что событие выбрано на текущем шаге
        probability = ExactRational(event_weight, total)

        if rounds_remaining > 1:
            # Обход по позициям: одинаковые веса посещаются по одному разу на вхождение
            for i, weight in enumerate(pool):
                branch = self._inclusion(
                    event_weight,
                    pool[:i] + pool[i + 1:],
                    removal_history.with_removed(weight),
                    rounds_remaining - 1,
                )
                contribution = self.continuation_chance.multiply(
                    ExactRational(weight, total)
                ).multiply(branch)
                probability = probability.add(contribution)

        self._states_computed += 1
        if self.use_cache:
            self._cache[removal_history] = probability
        return probability

    # -------------------------------------------------------------------------
    # Итоговая вероятность
    # -------------------------------------------------------------------------

    def overall_probability(
        self,
        vote_id: str,
        discard_chance: ExactRational,
        max_extra_rounds: int,
    ) -> ExactRational:
        """
        Вероятность появления vote_id в следующем голосовании.

        Args:
            vote_id: ID голосования
            discard_chance: шанс repeal-голосования (диапазон не проверяется)
            max_extra_rounds: максимум дополнительных голосований (>= 0)

        Returns:
            inclusion_probability(...) * (1 - discard_chance)

        Raises:
            UnknownVoteId: если vote_id отсутствует (до любых вычислений)
            ValueError: если max_extra_rounds < 0
        """
        if max_extra_rounds < 0:
            raise ValueError(f"max_extra_rounds must be >= 0, got {max_extra_rounds}")

        event_weight = self.weight_table.weight_of(vote_id)
        pool = self.weight_table.pool_without(vote_id)

        logger.debug(
            "Computing probability for %s: weight=%d pool_size=%d rounds=%d",
            vote_id,
            event_weight,
            len(pool),
            max_extra_rounds + 1,
        )

        base = self.inclusion_probability(
            event_weight, pool, EMPTY_REMOVALS, max_extra_rounds + 1
        )
        result = base.multiply(ONE.subtract(discard_chance))

        logger.debug(
            "Computed probability for %s: states=%d cache_hits=%d",
            vote_id,
            self._states_computed,
            self._cache_hits,
        )
        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def overall_probability(
    weight_table: WeightTable,
    vote_id: str,
    discard_chance: ExactRational,
    continuation_chance: ExactRational,
    max_extra_rounds: int,
    use_cache: bool = True,
) -> ExactRational:
    """
    Итоговая вероятность на свежем движке (кэш не разделяется между вызовами).
    """
    engine = ProbabilityEngine(weight_table, continuation_chance, use_cache=use_cache)
    return engine.overall_probability(vote_id, discard_chance, max_extra_rounds)


def calculate_probability(
    weight_table: WeightTable,
    vote_id: str,
    discard_chance_percent: int,
    continuation_chance_percent: int,
    max_extra_rounds: int,
) -> ExactRational:
    """
    Вычисление по целым процентам игровых параметров.

    Examples:
        >>> table = WeightTable(weights={"a": 1, "b": 2, "c": 3, "d": 4})
        >>> str(calculate_probability(table, "a", 50, 30, 1))
        '393/5600'
    """
    return overall_probability(
        weight_table,
        vote_id,
        ExactRational.from_percent(discard_chance_percent),
        ExactRational.from_percent(continuation_chance_percent),
        max_extra_rounds,
    )


def evaluate_query(
    weight_table: WeightTable,
    query: VoteQuery,
    use_cache: bool = True,
) -> ExactRational:
    return overall_probability(
        weight_table,
        query.vote_id,
        query.discard_chance(),
        query.continuation_chance(),
        query.max_extra_rounds,
        use_cache=use_cache,
    )

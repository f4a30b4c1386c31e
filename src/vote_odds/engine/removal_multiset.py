"""
RemovalMultiset — ключ мемоизации движка

Мультимножество (значение веса → число удалений) весов, удалённых из пула
вдоль одной ветви рекурсии.

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Две ветви, удалившие РАЗНЫЕ голосования, но ОДИНАКОВОЕ мультимножество
значений весов, вероятностно эквивалентны и обязаны попадать в один и тот же
ключ кэша. Поэтому ключ:
- не зависит от порядка удалений
- не зависит от идентичности голосований
- структурно хешируем (равные по содержимому экземпляры имеют равный hash)
"""

from collections import Counter
from dataclasses import dataclass
from typing import Final, Iterable


@dataclass(frozen=True)
class RemovalMultiset:
    """
    Неизменяемое мультимножество удалённых весов.

    Хранится как отсортированный кортеж пар (weight, count), count > 0.
    Каноническая форма обеспечивает структурные __eq__ и __hash__.
    """

    counts: tuple[tuple[int, int], ...] = ()

    def __post_init__(self) -> None:
        merged: Counter[int] = Counter()
        for weight, count in self.counts:
            if count <= 0:
                raise ValueError(f"removal count must be positive, got {count} for weight {weight}")
            merged[weight] += count
        object.__setattr__(self, "counts", tuple(sorted(merged.items())))

    @classmethod
    def from_weights(cls, weights: Iterable[int]) -> "RemovalMultiset":
        """
        Построение мультимножества из последовательности весов (порядок не важен).

        Examples:
            >>> RemovalMultiset.from_weights([3, 1, 3])
            RemovalMultiset(counts=((1, 1), (3, 2)))
        """
        return cls(tuple(Counter(weights).items()))

    def with_removed(self, weight: int) -> "RemovalMultiset":
        """Новое мультимножество с ещё одним вхождением weight."""
        return RemovalMultiset(self.counts + ((weight, 1),))

    def count_of(self, weight: int) -> int:
        return dict(self.counts).get(weight, 0)

    def size(self) -> int:
        """Общее число удалений (с учётом кратности)."""
        return sum(count for _, count in self.counts)

    def __len__(self) -> int:
        return self.size()


EMPTY_REMOVALS: Final[RemovalMultiset] = RemovalMultiset()

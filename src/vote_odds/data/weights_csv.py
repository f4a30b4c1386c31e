"""
Weights CSV — загрузка таблицы весов голосований

Формат: одна пара `vote_id,weight` на строку, без заголовка.

    day_length,100
    disable_spawning,50

Пустые строки пропускаются; пробелы вокруг полей отбрасываются.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable

from vote_odds.core.domain.weight_table import WeightTable

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class WeightTableFormatError(ValueError):
    """Некорректная строка или содержимое CSV с весами."""

    def __init__(self, message: str, source: str, line_number: int | None = None):
        self.source = source
        self.line_number = line_number
        location = source if line_number is None else f"{source}:{line_number}"
        super().__init__(f"{location}: {message}")


# =============================================================================
# PARSING
# =============================================================================


def parse_weight_rows(lines: Iterable[str], source: str = "<weights>") -> WeightTable:
    """
    Разбор строк `vote_id,weight` в WeightTable.

    Args:
        lines: итерируемые строки (например, открытый файл)
        source: имя источника для сообщений об ошибках

    Returns:
        Таблица весов в порядке строк

    Raises:
        WeightTableFormatError: при неверном числе полей, нецелом или
            неположительном весе, пустом или повторном id, пустой таблице
    """
    weights: dict[str, int] = {}

    for line_number, row in enumerate(csv.reader(lines), start=1):
        fields = [value.strip() for value in row]
        if not fields or all(not value for value in fields):
            continue

        if len(fields) != 2:
            raise WeightTableFormatError(
                f"expected 'vote_id,weight', got {len(fields)} field(s)", source, line_number
            )

        vote_id, raw_weight = fields
        if not vote_id:
            raise WeightTableFormatError("empty vote id", source, line_number)

        try:
            weight = int(raw_weight)
        except ValueError:
            raise WeightTableFormatError(
                f"weight of {vote_id!r} is not an integer: {raw_weight!r}", source, line_number
            ) from None

        if weight <= 0:
            raise WeightTableFormatError(
                f"weight of {vote_id!r} must be positive, got {weight}", source, line_number
            )

        if vote_id in weights:
            raise WeightTableFormatError(f"duplicate vote id {vote_id!r}", source, line_number)

        weights[vote_id] = weight

    if not weights:
        raise WeightTableFormatError("no votes found", source)

    return WeightTable(weights=weights)


def load_weight_table(path: str | Path) -> WeightTable:
    """
    Загрузка таблицы весов из CSV файла.

    Raises:
        FileNotFoundError: если файл отсутствует
        WeightTableFormatError: если содержимое некорректно
    """
    path = Path(path)

    with open(path, "r", encoding="utf-8", newline="") as f:
        table = parse_weight_rows(f, source=str(path))

    logger.info("Loaded %d vote weights from %s", len(table), path)
    return table

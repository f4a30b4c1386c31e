"""Data loaders — чтение таблицы весов из внешних источников."""

from .weights_csv import WeightTableFormatError, load_weight_table, parse_weight_rows

__all__ = [
    "WeightTableFormatError",
    "load_weight_table",
    "parse_weight_rows",
]

"""Helpers module - Random values, date and money formatting."""

from .data import (
    ValueKind,
    change_date_format,
    convert_to_money_format,
    generate_random_value,
    get_current_date,
    get_current_time,
)

__all__ = [
    "ValueKind",
    "generate_random_value",
    "get_current_date",
    "get_current_time",
    "change_date_format",
    "convert_to_money_format",
]

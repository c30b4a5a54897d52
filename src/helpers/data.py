"""Pure data helpers used alongside browser actions."""

import math
import random
import re
import string
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from src.core.exceptions import InvalidAmountError
from src.monitoring.logger import get_logger

logger = get_logger(__name__)


class ValueKind(str, Enum):
    """Character sets for random values."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    CHARACTERS = "characters"


CHARACTER_SETS = {
    ValueKind.NUMERIC: string.digits,
    ValueKind.ALPHANUMERIC: string.ascii_uppercase + string.ascii_lowercase + string.digits,
    ValueKind.CHARACTERS: "!@#$%^&*()_-+=<>?",
}

DEFAULT_DATE_FORMAT = "MMM D, YYYY"
DEFAULT_TIME_FORMAT = "h:mm:ss A"
DEFAULT_OUTPUT_DATE_FORMAT = "DD/MM/YYYY"

# Tried in order when no input format is given
INPUT_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
]

# Longest tokens first so "MMMM" wins over "MM"; [...] is a literal.
_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|DD|D|HH|H|hh|h|mm|ss|A")

_STRPTIME_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "DD": "%d",
    "D": "%d",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "ss": "%S",
    "A": "%p",
}

_AMOUNT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def generate_random_value(length: int, kind: ValueKind | str) -> str:
    """Generate a pseudo-random string.

    Args:
        length: Number of characters
        kind: numeric, alphanumeric or characters

    Returns:
        Random string, or "" for an unknown kind
    """
    try:
        characters = CHARACTER_SETS[ValueKind(kind)]
    except ValueError:
        logger.debug(f"Unknown random value kind: {kind}")
        return ""

    return "".join(random.choice(characters) for _ in range(max(length, 0)))


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


def format_datetime(dt: datetime, pattern: str) -> str:
    """Format a datetime with a token pattern such as ``MM/DD/YYYY``.

    Patterns containing ``%`` are passed to strftime unchanged.

    Args:
        dt: Datetime to format
        pattern: Token pattern or strftime format

    Returns:
        Formatted string
    """
    if "%" in pattern:
        return dt.strftime(pattern)

    def replace(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        token = match.group(0)
        values = {
            "YYYY": f"{dt.year:04d}",
            "YY": f"{dt.year % 100:02d}",
            "MMMM": dt.strftime("%B"),
            "MMM": dt.strftime("%b"),
            "MM": f"{dt.month:02d}",
            "M": str(dt.month),
            "DD": f"{dt.day:02d}",
            "D": str(dt.day),
            "HH": f"{dt.hour:02d}",
            "H": str(dt.hour),
            "hh": f"{_hour12(dt):02d}",
            "h": str(_hour12(dt)),
            "mm": f"{dt.minute:02d}",
            "ss": f"{dt.second:02d}",
            "A": "AM" if dt.hour < 12 else "PM",
        }
        return values[token]

    return _TOKEN_RE.sub(replace, pattern)


def to_strptime_format(pattern: str) -> str:
    """Translate a token pattern into a strptime format."""
    if "%" in pattern:
        return pattern

    def replace(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return _STRPTIME_TOKENS[match.group(0)]

    return _TOKEN_RE.sub(replace, pattern)


def get_current_date(fmt: str | None = None) -> str:
    """Get today's date, "Oct 19, 2026" style unless a pattern is given."""
    return format_datetime(datetime.now(), fmt or DEFAULT_DATE_FORMAT)


def get_current_time(fmt: str | None = None) -> str:
    """Get the current time, "3:04:05 PM" style unless a pattern is given."""
    return format_datetime(datetime.now(), fmt or DEFAULT_TIME_FORMAT)


def parse_date(value: str, input_format: str | None = None) -> datetime:
    """Parse a date string.

    Args:
        value: Date string
        input_format: Token pattern or strptime format; common formats are
            tried when omitted

    Returns:
        Parsed datetime

    Raises:
        ValueError: If the string matches no format
    """
    text = value.strip()
    if input_format:
        return datetime.strptime(text, to_strptime_format(input_format))

    for fmt in INPUT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Could not parse date: {value!r}") from None


def change_date_format(
    input_date: str,
    input_format: str | None = None,
    output_format: str | None = None,
) -> str:
    """Reformat a date string.

    Args:
        input_date: Date string
        input_format: Pattern of ``input_date`` (e.g. "YYYY-MM-DD")
        output_format: Desired pattern, DD/MM/YYYY by default

    Returns:
        Reformatted date
    """
    parsed = parse_date(input_date, input_format)
    return format_datetime(parsed, output_format or DEFAULT_OUTPUT_DATE_FORMAT)


def convert_to_money_format(amount: str) -> str:
    """Format an amount string as US dollars.

    The leading number of the string is used, so "12.5 USD" gives "$12.50".
    Numbers beyond the double range render as "$∞".

    Args:
        amount: String holding a number

    Returns:
        Currency string such as "$1,000.00"

    Raises:
        InvalidAmountError: If no number can be read
    """
    match = _AMOUNT_RE.match(str(amount))
    if not match:
        raise InvalidAmountError(amount)

    raw = Decimal(match.group(1))
    sign = "-" if raw.is_signed() else ""

    # Past the double range the number reads as infinite.
    if math.isinf(float(raw)):
        return f"{sign}$∞"

    with localcontext() as ctx:
        ctx.prec = max(28, raw.adjusted() + 3)
        value = abs(raw).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{sign}${value:,.2f}"

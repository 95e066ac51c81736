"""
Parser for the compact integer filter encoding.

An encoded filter is a delimited list of tokens such as ``>=10;<20;!15``.
A token is either a bare integer (an equality) or an operator alias
followed by an integer.
"""
import re
from typing import Dict, List, Optional, Tuple

from queryfilter.errors import ParsingError
from queryfilter.logging_config import get_logger, log_performance
from queryfilter.models import Constraint, Operator, Scalar

logger = get_logger(__name__)

DEFAULT_DELIMITER = ";"

# Encoded symbols first, canonical codes second.
ALIASES: Dict[str, Operator] = {
    "=": Operator.EQ,
    "!": Operator.NEQ,
    "<": Operator.LT,
    ">": Operator.GT,
    "<=": Operator.LTE,
    ">=": Operator.GTE,
    "eq": Operator.EQ,
    "neq": Operator.NEQ,
    "lt": Operator.LT,
    "lte": Operator.LTE,
    "gt": Operator.GT,
    "gte": Operator.GTE,
}

SYMBOLS: Dict[Operator, str] = {
    Operator.EQ: "=",
    Operator.NEQ: "!",
    Operator.LT: "<",
    Operator.GT: ">",
    Operator.LTE: "<=",
    Operator.GTE: ">=",
}

_LONGEST_ALIAS = max(len(alias) for alias in ALIASES)
_INTEGER = re.compile(r"[+-]?[0-9]+")
_LEADING_NON_DIGITS = re.compile(r"[^0-9]*")
# Default CPython limit for str -> int conversion.
MAX_DIGITS = 4300


def split_tokens(raw: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split an encoded filter, dropping empty and repeated tokens."""
    return list(dict.fromkeys(token for token in raw.split(delimiter) if token))


def split_operator(token: str) -> Tuple[Operator, str]:
    """
    Separate the operator alias from the numeric part of a token.

    The longest alias that prefixes the token wins, so ``<=5`` is read as
    "less or equal 5" and not as "less than =5".

    Raises:
        ParsingError: if no alias prefixes the token
    """
    if token[0].isdigit() or _INTEGER.fullmatch(token):
        return Operator.EQ, token

    for length in range(min(_LONGEST_ALIAS, len(token)), 0, -1):
        operator = ALIASES.get(token[:length])
        if operator is not None:
            return operator, token[length:]

    alias = _LEADING_NON_DIGITS.match(token).group()
    raise ParsingError(f"Unknown operator for integer type: {alias!r} in {token!r}")


def parse_integer(text: str) -> int:
    """Parse an integer literal, rejecting anything but optional sign and ASCII digits."""
    if not _INTEGER.fullmatch(text):
        raise ParsingError(f"Expected numeric value, got {text!r}")
    digits = len(text.lstrip("+-"))
    if digits > MAX_DIGITS:
        raise ParsingError(f"Integer literal too long: {digits} digits")
    try:
        return int(text)
    except ValueError as e:
        # sys.set_int_max_str_digits() may have lowered the limit
        raise ParsingError(f"Integer literal too long: {digits} digits") from e


def parse_token(token: str) -> Constraint:
    """Parse a single token into a scalar-valued constraint."""
    operator, remainder = split_operator(token)
    return Constraint(operator=operator, value=Scalar(value=parse_integer(remainder)))


@log_performance(logger, "parse")
def parse(raw: Optional[str], delimiter: str = DEFAULT_DELIMITER) -> List[Constraint]:
    """
    Parse an encoded integer filter.

    Args:
        raw: Encoded filter, or None for "no filter"
        delimiter: Token separator

    Returns:
        Constraints in the order their tokens first appear

    Raises:
        ParsingError: if any token is malformed; nothing is returned in that case
    """
    if raw is None:
        return []

    constraints = []
    for token in split_tokens(raw, delimiter):
        try:
            constraints.append(parse_token(token))
        except ParsingError as e:
            logger.debug("Rejected filter %r: %s", raw, e)
            raise

    return constraints

"""
Translate integer constraints into parameterized WHERE-clause fragments.
"""
import re
from typing import List

from queryfilter.errors import ParsingError
from queryfilter.logging_config import get_logger, log_performance
from queryfilter.models import Constraint, Filter, IntSet, Operator, Scalar, SqlFragment

logger = get_logger(__name__)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_LOWER_BOUNDS = {Operator.GT: ">", Operator.GTE: ">="}
_UPPER_BOUNDS = {Operator.LT: "<", Operator.LTE: "<="}


def column_sql(table_alias: str, field: str) -> str:
    """Render ``alias.field``; both parts are plain identifiers, so no quoting applies."""
    return f"{table_alias}.{field}"


def placeholder_name(table_alias: str, field: str, position: int) -> str:
    """Name of the parameter bound by the n-th (1-based) fragment on a field."""
    base = f"{table_alias}_{field}"
    return base if position == 1 else f"{base}{position}"


def build_fragment(column: str, placeholder: str, constraint: Constraint) -> SqlFragment:
    """Build the SQL fragment for a single constraint."""
    operator = constraint.operator
    value = constraint.value

    if operator in _LOWER_BOUNDS:
        return SqlFragment(
            sql=f"{column} {_LOWER_BOUNDS[operator]} :{placeholder}",
            parameters={placeholder: Scalar(value=value.maximum)},
        )
    if operator in _UPPER_BOUNDS:
        return SqlFragment(
            sql=f"{column} {_UPPER_BOUNDS[operator]} :{placeholder}",
            parameters={placeholder: Scalar(value=value.minimum)},
        )
    if operator in (Operator.EQ, Operator.NEQ):
        items = value.items()
        if isinstance(value, IntSet) and len(items) > 1:
            keyword = "IN" if operator == Operator.EQ else "NOT IN"
            return SqlFragment(sql=f"{column} {keyword} (:{placeholder})", parameters={placeholder: value})
        comparison = "=" if operator == Operator.EQ else "!="
        return SqlFragment(
            sql=f"{column} {comparison} :{placeholder}",
            parameters={placeholder: Scalar(value=items[0])},
        )

    raise ParsingError(f"Undefined behavior for operator: {operator!r}")


@log_performance(logger, "build_sql_parts")
def build_sql_parts(filter: Filter, table_alias: str = "t") -> List[SqlFragment]:
    """
    Create one SQL fragment per constraint of a filter.

    The first fragment binds ``{alias}_{field}``, the following ones append
    their position (``{alias}_{field}2``, ``{alias}_{field}3``, ...).

    Args:
        filter: Field and its (usually optimized) constraints
        table_alias: Alias of the table the field belongs to

    Returns:
        Fragments in constraint order

    Raises:
        ParsingError: for an invalid alias or an unknown operator
    """
    if not _IDENTIFIER.fullmatch(table_alias):
        raise ParsingError(f"Invalid table alias: {table_alias!r}")

    column = column_sql(table_alias, filter.field)
    return [
        build_fragment(column, placeholder_name(table_alias, filter.field, position), constraint)
        for position, constraint in enumerate(filter.constraints, start=1)
    ]

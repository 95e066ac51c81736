"""
Result-returning entry points for the integer filter pipeline.

Each stage is wrapped so that malformed input comes back as an Err value
instead of an exception. Errors that are not FilterError still propagate.
"""
from typing import List, Optional

from pydantic import ValidationError

from queryfilter.errors import ParsingError
from queryfilter.models import Constraint, Filter, SqlFragment
from queryfilter.result import Err, Result, capture
from queryfilter.serializer.base import OptionsLike
from queryfilter.serializer.integer import IntegerSerializer
from queryfilter.serializer.optimizer import optimize
from queryfilter.serializer.parser import DEFAULT_DELIMITER, parse
from queryfilter.serializer.sql import build_sql_parts


@capture
def try_parse(raw: Optional[str], delimiter: str = DEFAULT_DELIMITER) -> List[Constraint]:
    return parse(raw, delimiter)


@capture
def try_optimize(constraints: List[Constraint], enabled: bool = True) -> List[Constraint]:
    return optimize(constraints, enabled)


@capture
def try_build_sql_parts(filter: Filter, table_alias: str = "t") -> List[SqlFragment]:
    return build_sql_parts(filter, table_alias)


@capture
def make_filter(field: str, constraints: List[Constraint]) -> Filter:
    try:
        return Filter(field=field, constraints=constraints)
    except ValidationError as e:
        raise ParsingError(f"Invalid field name: {field!r}") from e


def run(raw: Optional[str], field: str, options: OptionsLike = None, table_alias: str = "t") -> Result:
    """
    Decode an encoded integer filter for field and emit its SQL fragments.

    Returns:
        Ok with the list of SqlFragment, or Err with the first FilterError;
        an invalid field name is reported as ParsingError
    """
    serializer = IntegerSerializer(options)

    constraints = capture(serializer.unserialize)(raw)
    if isinstance(constraints, Err):
        return constraints

    filter = make_filter(field, constraints.value)
    if isinstance(filter, Err):
        return filter

    return try_build_sql_parts(filter.value, table_alias)

from queryfilter.errors import FilterError, InternalConsistencyError, ParsingError
from queryfilter.models import Constraint, Filter, IntSet, Operator, Scalar, SqlFragment
from queryfilter.options import SerializerOptions
from queryfilter.result import Err, Ok
from queryfilter.serializer import IntegerSerializer, build_sql_parts, get_serializer, optimize, parse

__all__ = [
    "Constraint",
    "Err",
    "Filter",
    "FilterError",
    "IntSet",
    "IntegerSerializer",
    "InternalConsistencyError",
    "Ok",
    "Operator",
    "ParsingError",
    "Scalar",
    "SerializerOptions",
    "SqlFragment",
    "build_sql_parts",
    "get_serializer",
    "optimize",
    "parse",
]

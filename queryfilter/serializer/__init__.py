from queryfilter.serializer.base import AbstractSerializer, get_serializer, register_serializer
from queryfilter.serializer.integer import IntegerSerializer
from queryfilter.serializer.optimizer import optimize
from queryfilter.serializer.parser import parse
from queryfilter.serializer.sql import build_sql_parts

__all__ = [
    "AbstractSerializer",
    "IntegerSerializer",
    "build_sql_parts",
    "get_serializer",
    "optimize",
    "parse",
    "register_serializer",
]

"""
Shared fixtures for the queryfilter test suite.
"""

import pytest

from queryfilter.models import Constraint, Filter, IntSet, Operator, Scalar
from queryfilter.options import SerializerOptions
from queryfilter.serializer.integer import IntegerSerializer


def scalar(operator: Operator, value: int) -> Constraint:
    """Shorthand for a scalar-valued constraint."""
    return Constraint(operator=operator, value=Scalar(value=value))


def int_set(operator: Operator, *values: int) -> Constraint:
    """Shorthand for a set-valued constraint."""
    return Constraint(operator=operator, value=IntSet(values=values))


@pytest.fixture
def serializer() -> IntegerSerializer:
    """Integer serializer with default options."""
    return IntegerSerializer()


@pytest.fixture
def raw_serializer() -> IntegerSerializer:
    """Integer serializer that skips optimization."""
    return IntegerSerializer(SerializerOptions(optimize=False))


@pytest.fixture
def age_filter() -> Filter:
    """A filter on the age column with one constraint of every operator."""
    return Filter(
        field="age",
        constraints=[
            scalar(Operator.GT, 18),
            scalar(Operator.LTE, 65),
            int_set(Operator.NEQ, 30, 40),
            int_set(Operator.EQ, 25),
        ],
    )

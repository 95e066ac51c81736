"""
Models shared by the parser, the optimizer and the SQL emitter.
"""
from enum import Enum
from typing import Annotated, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Operator(str, Enum):
    """Comparison operators an integer constraint can carry."""
    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"

    @property
    def is_range(self) -> bool:
        """True for the one-sided bounds (<, <=, >, >=)."""
        return self in (Operator.LT, Operator.LTE, Operator.GT, Operator.GTE)


class Scalar(BaseModel):
    """A single integer value."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    value: int

    def items(self) -> Tuple[int, ...]:
        return (self.value,)

    @property
    def maximum(self) -> int:
        return self.value

    @property
    def minimum(self) -> int:
        return self.value


class IntSet(BaseModel):
    """A set of distinct integers, kept in first-seen order."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["set"] = "set"
    values: Tuple[int, ...] = Field(..., min_length=1)

    @field_validator("values")
    @classmethod
    def _distinct(cls, values: Tuple[int, ...]) -> Tuple[int, ...]:
        if len(set(values)) != len(values):
            raise ValueError(f"duplicate values in set: {values}")
        return values

    def items(self) -> Tuple[int, ...]:
        return self.values

    @property
    def maximum(self) -> int:
        return max(self.values)

    @property
    def minimum(self) -> int:
        return min(self.values)


Value = Annotated[Union[Scalar, IntSet], Field(discriminator="kind")]


class Constraint(BaseModel):
    """One operator and value restricting an integer field."""
    model_config = ConfigDict(frozen=True)

    operator: Operator
    value: Value


class Filter(BaseModel):
    """Constraints applying to a single field."""
    model_config = ConfigDict(frozen=True)

    field: str = Field(..., pattern=r"^[A-Za-z_][A-Za-z0-9_]*$", description="Column the constraints apply to")
    constraints: List[Constraint] = Field(default_factory=list)


class SqlFragment(BaseModel):
    """A piece of WHERE-clause SQL together with its named parameters."""
    model_config = ConfigDict(frozen=True)

    sql: str
    parameters: Dict[str, Value]

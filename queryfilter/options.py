"""
Options understood by the value-type serializers.
"""
from typing import Any, FrozenSet, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from queryfilter.models import Operator


class SerializerOptions(BaseModel):
    """Configuration passed to a serializer and the stages it drives."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    ranges: bool = Field(True, description="Allow the range operators <, <=, > and >=")
    optimize: bool = Field(True, description="Collapse redundant constraints after parsing")
    limited: Optional[FrozenSet[Operator]] = Field(
        None, description="If set, only these operators are accepted"
    )
    delimiter: str = Field(";", min_length=1, description="Separator between encoded tokens")

    @classmethod
    def from_mapping(
        cls, options: Union["SerializerOptions", Mapping[str, Any], None] = None
    ) -> "SerializerOptions":
        """Build options from an existing instance, a plain mapping or nothing."""
        if options is None:
            return cls()
        if isinstance(options, SerializerOptions):
            return options
        return cls.model_validate(dict(options))

    def allows(self, operator: Operator) -> bool:
        """Whether an operator may appear in a filter under these options."""
        if not self.ranges and operator.is_range:
            return False
        if self.limited is not None and operator not in self.limited:
            return False
        return True

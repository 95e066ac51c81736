"""
Base class and registry for value-type serializers.

Each value type (integer, and whatever else a host application plugs in)
provides a serializer that decodes its compact filter encoding and emits SQL
fragments for it. Serializers are looked up by NAME.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, Union

from queryfilter.models import Constraint, Filter, SqlFragment
from queryfilter.options import SerializerOptions

OptionsLike = Union[SerializerOptions, Mapping[str, Any], None]

_registry: Dict[str, Type["AbstractSerializer"]] = {}


class AbstractSerializer(ABC):
    NAME: ClassVar[str]

    def __init__(self, options: OptionsLike = None):
        self.options = SerializerOptions.from_mapping(options)

    def get_option(self, name: str, default: Any = None) -> Any:
        return getattr(self.options, name, default)

    @abstractmethod
    def serialize(self, constraints: List[Constraint]) -> str:
        raise NotImplementedError()

    @abstractmethod
    def unserialize(self, raw: Optional[str]) -> List[Constraint]:
        raise NotImplementedError()

    @abstractmethod
    def build_sql_parts(self, filter: Filter, table_alias: str = "t") -> List[SqlFragment]:
        raise NotImplementedError()


def register_serializer(cls: Type[AbstractSerializer]) -> Type[AbstractSerializer]:
    """Class decorator making a serializer available through get_serializer."""
    _registry[cls.NAME] = cls
    return cls


def get_serializer(name: str, options: OptionsLike = None) -> AbstractSerializer:
    """Instantiate the serializer registered under name."""
    cls = _registry.get(name)
    if cls is None:
        raise ValueError(f"No serializer registered for value type {name!r}")
    return cls(options)

"""Declarative parameter tables for queries and forms.

A query or form is a :class:`ParameterSet` subclass whose class body
declares :class:`Param` descriptors. The declaration order is the order in
which parameters are written to the wire, whatever order the caller set
them in. Fields declared on a subclass come before inherited ones.

Every parameter is either :data:`UNSET` or holds a value. Only parameters
holding a value are encoded, so ``paused=False`` is sent while a
parameter that was never assigned is left out entirely. Assigning
``None`` (or deleting the attribute) returns a parameter to ``UNSET``.

Example::

    class CampaignQuery(EntityQuery):
        campaign_ids = Param(kind=ValueKind.STRING_LIST)

    query = CampaignQuery(campaign_ids=["a", "b"], count=10)
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Type, Union

from .codec import TimeWindow, ValueKind


class _Unset:
    """Marker for a parameter that was never assigned."""

    _instance: Optional["_Unset"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "UNSET"


UNSET = _Unset()


class Param:
    """One named request parameter.

    :param wire_name: Key sent to the API; defaults to the attribute name.
        ``TIMESTAMP_RANGE`` parameters take a ``(start, end)`` pair of keys
    :type wire_name: Optional[Union[str, Tuple[str, str]]]
    :param kind: Declared value kind
    :type kind: ValueKind
    :param enum_type: Enum class for enum kinds
    :type enum_type: Optional[Type[Enum]]
    """

    def __init__(
        self,
        wire_name: Optional[Union[str, Tuple[str, str]]] = None,
        kind: ValueKind = ValueKind.STRING,
        enum_type: Optional[Type[Enum]] = None,
    ):
        if kind in (ValueKind.ENUM, ValueKind.ENUM_LIST) and enum_type is None:
            raise TypeError(f"{kind.value} parameters need an enum_type")
        if kind is ValueKind.TIMESTAMP_RANGE and wire_name is None:
            wire_name = ("start_time", "end_time")
        self.kind = kind
        self.enum_type = enum_type
        self._wire_name = wire_name
        self.name: Optional[str] = None

    def __set_name__(self, owner, name: str) -> None:
        self.name = name
        if self._wire_name is None:
            self._wire_name = name

    @property
    def wire_name(self) -> str:
        if isinstance(self._wire_name, tuple):
            return ",".join(self._wire_name)
        return self._wire_name

    @property
    def wire_names(self) -> Tuple[str, ...]:
        if isinstance(self._wire_name, tuple):
            return self._wire_name
        return (self._wire_name,)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._values.get(self.name, UNSET)

    def __set__(self, instance, value) -> None:
        if value is None or value is UNSET:
            instance._values.pop(self.name, None)
        else:
            instance._values[self.name] = value

    def __delete__(self, instance) -> None:
        instance._values.pop(self.name, None)

    def __repr__(self) -> str:
        return f"Param({self.name!r}, wire_name={self._wire_name!r}, kind={self.kind.value})"


class ParameterSet:
    """Base class for query and form declarations.

    The class attribute ``fields`` holds the resolved parameter table in
    wire order. Inherited descriptors are shared between subclasses, so a
    parameter's position is only meaningful per class.
    """

    fields: ClassVar[Tuple[Param, ...]] = ()
    _order: ClassVar[Dict[str, int]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        own = [value for value in vars(cls).values() if isinstance(value, Param)]
        own_names = {param.name for param in own}
        inherited: List[Param] = []
        for base in cls.__bases__:
            for param in getattr(base, "fields", ()):
                if param.name not in own_names and param not in inherited:
                    inherited.append(param)
        table = tuple(own + inherited)
        cls.fields = table
        cls._order = {param.name: index for index, param in enumerate(table)}

    def __init__(self, **values: Any):
        self._values: Dict[str, Any] = {}
        for name, value in values.items():
            if name not in self._order:
                raise TypeError(f"{type(self).__name__} has no parameter '{name}'")
            setattr(self, name, value)

    def is_set(self, name: str) -> bool:
        return name in self._values

    def unset(self, name: str) -> None:
        if name not in self._order:
            raise TypeError(f"{type(self).__name__} has no parameter '{name}'")
        self._values.pop(name, None)

    def _wire_values(self) -> Dict[str, Any]:
        """Values to encode; subclasses add parameters implied by others here."""
        return self._values

    def items(self) -> Iterator[Tuple[Param, Any]]:
        """Yield ``(param, value)`` for every parameter to encode, in wire order."""
        values = self._wire_values()
        for param in self.fields:
            if param.name in values:
                yield param, values[param.name]

    def copy(self, **changes: Any) -> "ParameterSet":
        """Return a copy with some parameters replaced."""
        clone = type(self).__new__(type(self))
        clone._values = dict(self._values)
        for name, value in changes.items():
            if name not in self._order:
                raise TypeError(f"{type(self).__name__} has no parameter '{name}'")
            setattr(clone, name, value)
        return clone

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(
            f"{param.name}={self._values[param.name]!r}"
            for param in self.fields
            if param.name in self._values
        )
        return f"{type(self).__name__}({body})"


class ActiveWindowMixin:
    """Helpers for parameter sets declaring an ``active_window`` range."""

    active_window: Any

    def active_between(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ):
        self.active_window = TimeWindow(start, end)
        return self

    def active_from(self, start: datetime):
        current = self.active_window or TimeWindow()
        self.active_window = TimeWindow(start, current.end)
        return self

    def active_until(self, end: datetime):
        current = self.active_window or TimeWindow()
        self.active_window = TimeWindow(current.start, end)
        return self

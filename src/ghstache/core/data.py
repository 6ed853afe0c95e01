from __future__ import annotations

"""
data – Tagged-union value model bound into templates.

A :class:`Data` instance holds exactly one variant at a time:

  • OBJECT      → dict[str, Data]
  • STRING      → str
  • LIST        → list[Data]
  • BOOL_TRUE / BOOL_FALSE (nullary)
  • PARTIAL     → :class:`Partial`, text materialised on demand
  • LAMBDA      → :class:`Lambda`, raw text → text
  • LAMBDA2     → :class:`Lambda2`, (raw text, render handle) → text
  • INVALID     → left behind by :meth:`Data.take`

Plain Python values convert recursively, so ``Data({"items": ["a", "b"]})``
is the same as building the object and list by hand.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from ghstache.core.interfaces.render import RendererProtocol


class DataType(Enum):
    OBJECT = 'object'
    STRING = 'string'
    LIST = 'list'
    BOOL_TRUE = 'bool_true'
    BOOL_FALSE = 'bool_false'
    PARTIAL = 'partial'
    LAMBDA = 'lambda'
    LAMBDA2 = 'lambda2'
    INVALID = 'invalid'


@dataclass(frozen=True)
class Partial:
    """Zero-argument callback returning template text."""
    fn: Callable[[], str]

    def __call__(self) -> str:
        return self.fn()


@dataclass(frozen=True)
class Lambda:
    """Callback receiving the raw, unparsed section text."""
    fn: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.fn(text)


@dataclass(frozen=True)
class Lambda2:
    """Callback receiving the raw section text and a render handle."""
    fn: Callable[[str, RendererProtocol], str]

    def __call__(self, text: str, render: RendererProtocol) -> str:
        return self.fn(text, render)


_CALLABLE_TYPES = {
    Partial: DataType.PARTIAL,
    Lambda: DataType.LAMBDA,
    Lambda2: DataType.LAMBDA2,
}

_MISSING = object()


class Data:
    """One template-bindable value. See the module docstring for variants."""

    __slots__ = ('_type', '_value')
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = _MISSING, inner: Any = _MISSING) -> None:
        self._type: DataType = DataType.OBJECT
        self._value: Any = {}
        if inner is not _MISSING:
            # Data(name, value) → single-key object
            if not isinstance(value, str):
                raise TypeError(f'object key must be a string, got {type(value).__name__}')
            self.set(value, inner)
            return
        if value is _MISSING:
            return
        if isinstance(value, DataType):
            self._init_from_type(value)
            return
        self._type, self._value = _convert(value)

    def _init_from_type(self, kind: DataType) -> None:
        self._type = kind
        if kind is DataType.OBJECT:
            self._value = {}
        elif kind is DataType.STRING:
            self._value = ''
        elif kind is DataType.LIST:
            self._value = []
        elif kind in (DataType.PARTIAL, DataType.LAMBDA, DataType.LAMBDA2):
            raise ValueError(f'{kind.value} data requires a callable payload')
        else:
            self._value = None

    # ------------------------------------------------------------------ #
    # Type info
    # ------------------------------------------------------------------ #
    @property
    def type(self) -> DataType:
        return self._type

    def is_object(self) -> bool:
        return self._type is DataType.OBJECT

    def is_string(self) -> bool:
        return self._type is DataType.STRING

    def is_list(self) -> bool:
        return self._type is DataType.LIST

    def is_bool(self) -> bool:
        return self.is_true() or self.is_false()

    def is_true(self) -> bool:
        return self._type is DataType.BOOL_TRUE

    def is_false(self) -> bool:
        return self._type is DataType.BOOL_FALSE

    def is_partial(self) -> bool:
        return self._type is DataType.PARTIAL

    def is_lambda(self) -> bool:
        return self._type is DataType.LAMBDA

    def is_lambda2(self) -> bool:
        return self._type is DataType.LAMBDA2

    def is_invalid(self) -> bool:
        return self._type is DataType.INVALID

    # ------------------------------------------------------------------ #
    # Object data
    # ------------------------------------------------------------------ #
    def set(self, name: str, value: Any) -> None:
        self._require(DataType.OBJECT)
        self._value[name] = Data(value)

    def get(self, name: str) -> Optional[Data]:
        """Return the member *name*, or None when missing or not an object."""
        if self._type is not DataType.OBJECT:
            return None
        return self._value.get(name)

    def __getitem__(self, name: str) -> Data:
        self._require(DataType.OBJECT)
        return self._value[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return self._type is DataType.OBJECT and name in self._value

    # ------------------------------------------------------------------ #
    # List data
    # ------------------------------------------------------------------ #
    def append(self, value: Any) -> Data:
        self._require(DataType.LIST)
        self._value.append(Data(value))
        return self

    @property
    def list_value(self) -> List[Data]:
        self._require(DataType.LIST)
        return self._value

    def is_empty_list(self) -> bool:
        return self._type is DataType.LIST and not self._value

    def is_non_empty_list(self) -> bool:
        return self._type is DataType.LIST and bool(self._value)

    def __iter__(self) -> Iterator[Data]:
        return iter(self.list_value)

    # ------------------------------------------------------------------ #
    # Scalar / callable data
    # ------------------------------------------------------------------ #
    @property
    def string_value(self) -> str:
        self._require(DataType.STRING)
        return self._value

    @property
    def partial_value(self) -> Partial:
        self._require(DataType.PARTIAL)
        return self._value

    @property
    def lambda_value(self) -> Lambda:
        self._require(DataType.LAMBDA)
        return self._value

    @property
    def lambda2_value(self) -> Lambda2:
        self._require(DataType.LAMBDA2)
        return self._value

    # ------------------------------------------------------------------ #
    # Copy / move
    # ------------------------------------------------------------------ #
    def copy(self) -> Data:
        """Deep-clone the active slot. Callables are shared, not cloned."""
        clone = Data.__new__(Data)
        clone._type = self._type
        if self._type is DataType.OBJECT:
            clone._value = {k: v.copy() for k, v in self._value.items()}
        elif self._type is DataType.LIST:
            clone._value = [v.copy() for v in self._value]
        else:
            clone._value = self._value
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> Data:
        return self.copy()

    def take(self) -> Data:
        """Move the payload into a new instance; *self* becomes INVALID."""
        moved = Data.__new__(Data)
        moved._type, moved._value = self._type, self._value
        self._type, self._value = DataType.INVALID, None
        return moved

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __repr__(self) -> str:
        if self._value is None:
            return f'Data({self._type.name})'
        return f'Data({self._type.name}, {self._value!r})'

    def _require(self, kind: DataType) -> None:
        if self._type is not kind:
            raise TypeError(f'expected {kind.value} data, got {self._type.value}')


def _convert(value: Any) -> tuple[DataType, Any]:
    """Map a plain Python value to a (type, payload) pair."""
    if isinstance(value, Data):
        clone = value.copy()
        return clone._type, clone._value
    if isinstance(value, bool):
        return (DataType.BOOL_TRUE if value else DataType.BOOL_FALSE), None
    if value is None:
        return DataType.BOOL_FALSE, None
    if isinstance(value, str):
        return DataType.STRING, value
    if isinstance(value, (int, float)):
        return DataType.STRING, str(value)
    for cls, kind in _CALLABLE_TYPES.items():
        if isinstance(value, cls):
            return kind, value
    if isinstance(value, Mapping):
        obj: Dict[str, Data] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f'object key must be a string, got {type(key).__name__}')
            obj[key] = Data(item)
        return DataType.OBJECT, obj
    if isinstance(value, (list, tuple)):
        return DataType.LIST, [Data(item) for item in value]
    if callable(value):
        raise TypeError('ambiguous callable; wrap it in Partial, Lambda or Lambda2')
    raise TypeError(f'cannot convert {type(value).__name__} to template data')

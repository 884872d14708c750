# ethabi_types
#
# Copyright (C) 2023 Allison Karlitskaya <allison.karlitskaya@redhat.com>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# This file defines the tree of parameter types that the reader produces.
#
# Each ParamType corresponds to a (possibly composite) ABI type.  The set of
# variants is closed: leaves (Address, Bool, String, Bytes, FixedBytes, Int,
# Uint) and composites (Array, FixedArray, Tuple, FixedTuple) that own their
# children.
#
# Instances are interned: constructing the same type twice gives back the
# same object, so comparing two types is the same as comparing identities.
# The intern table only holds weak references, so types nobody uses any more
# go away.  Nothing ever mutates a type after construction.

import threading
import weakref
from typing import Any, ClassVar, Iterable, Sequence, Tuple as TypingTuple


def check_width(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be 'int', not '{value.__class__.__name__}'")
    if value < 0:
        raise ValueError(f"{name} must not be negative, not {value}")
    return value


def check_param_type(value: object) -> 'ParamType':
    if not isinstance(value, ParamType):
        raise TypeError(f"Expected a parameter type, not '{value.__class__.__name__}'")
    return value


class ParamType:
    _cache: ClassVar[weakref.WeakValueDictionary] = weakref.WeakValueDictionary()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    __slots__ = '__weakref__'

    def __new__(cls, *args: Any) -> 'ParamType':
        # build and check a candidate first, so the table only ever holds
        # complete instances
        candidate = object.__new__(cls)
        candidate._setup(*args)
        with ParamType._lock:
            return ParamType._cache.setdefault((cls, args), candidate)

    def _setup(self) -> None:
        pass

    def _args(self) -> TypingTuple[object, ...]:
        return ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(arg) for arg in self._args())})"

    def __reduce__(self) -> TypingTuple[type, TypingTuple[object, ...]]:
        return (self.__class__, self._args())


class Address(ParamType):
    __slots__ = ()


class Bool(ParamType):
    __slots__ = ()


class String(ParamType):
    __slots__ = ()


class Bytes(ParamType):
    __slots__ = ()


class FixedBytes(ParamType):
    __slots__ = 'size'
    size: int

    def _setup(self, size: int) -> None:
        self.size = check_width('size', size)

    def _args(self) -> TypingTuple[object, ...]:
        return (self.size,)


class Int(ParamType):
    __slots__ = 'bits'
    bits: int

    def _setup(self, bits: int) -> None:
        self.bits = check_width('bits', bits)

    def _args(self) -> TypingTuple[object, ...]:
        return (self.bits,)


class Uint(ParamType):
    __slots__ = 'bits'
    bits: int

    def _setup(self, bits: int) -> None:
        self.bits = check_width('bits', bits)

    def _args(self) -> TypingTuple[object, ...]:
        return (self.bits,)


class Array(ParamType):
    __slots__ = 'item_type'
    item_type: ParamType

    def _setup(self, item_type: ParamType) -> None:
        self.item_type = check_param_type(item_type)

    def _args(self) -> TypingTuple[object, ...]:
        return (self.item_type,)


class FixedArray(ParamType):
    __slots__ = 'item_type', 'length'
    item_type: ParamType
    length: int

    def _setup(self, item_type: ParamType, length: int) -> None:
        self.item_type = check_param_type(item_type)
        self.length = check_width('length', length)

    def _args(self) -> TypingTuple[object, ...]:
        return (self.item_type, self.length)


class ContainerType(ParamType):
    __slots__ = 'item_types'
    item_types: TypingTuple[ParamType, ...]

    def _setup(self, *item_types: ParamType) -> None:
        self.item_types = tuple(check_param_type(item) for item in item_types)

    def _args(self) -> TypingTuple[object, ...]:
        return self.item_types


class Tuple(ContainerType):
    __slots__ = ()


class FixedTuple(ContainerType):
    __slots__ = ()


def is_dynamic(param_type: ParamType) -> bool:
    """Determine if a type has a variable encoded size

    Bytes, String, Array and Tuple are always dynamic.  A FixedArray or a
    FixedTuple is dynamic when anything it contains is.  The remaining leaves
    are static.

    :param_type: the type to classify
    :returns: True if the type is dynamic
    """
    if isinstance(param_type, (Bytes, String, Array, Tuple)):
        return True
    elif isinstance(param_type, FixedArray):
        return is_dynamic(param_type.item_type)
    elif isinstance(param_type, FixedTuple):
        return any(is_dynamic(item) for item in param_type.item_types)
    elif isinstance(param_type, (Address, Bool, FixedBytes, Int, Uint)):
        return False
    else:
        raise TypeError(f"'{param_type!r}' is not a parameter type")


def _forces_dynamic_tuple(member: ParamType) -> bool:
    # Only the member's own variant counts: a FixedArray never makes its
    # tuple dynamic, whatever its items are.
    if isinstance(member, (Bytes, String, Array, Tuple)):
        return True
    elif isinstance(member, (Address, Bool, FixedBytes, Int, Uint, FixedArray, FixedTuple)):
        return False
    else:
        raise TypeError(f"'{member!r}' is not a parameter type")


def tuple_of(item_types: Iterable[ParamType]) -> ContainerType:
    """Build the tuple variant appropriate for the given members

    :item_types: the members, in order
    :returns: Tuple if a member is Bytes, String, Array or Tuple, else FixedTuple
    """
    members: Sequence[ParamType] = tuple(item_types)
    if any(_forces_dynamic_tuple(member) for member in members):
        return Tuple(*members)
    else:
        return FixedTuple(*members)

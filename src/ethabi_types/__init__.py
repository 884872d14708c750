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

"""Read contract ABI type signatures into ParamType trees"""

from .abi import Param
from .errors import Error, InvalidName, InvalidNumber, NestingTooDeep
from .paramtype import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    FixedTuple,
    Int,
    ParamType,
    String,
    Tuple,
    Uint,
    is_dynamic,
)
from .reader import MAX_DEPTH, is_type_signature, read

__version__ = '0.1.0'

__all__ = [
    "Address",
    "Array",
    "Bool",
    "Bytes",
    "Error",
    "FixedArray",
    "FixedBytes",
    "FixedTuple",
    "Int",
    "InvalidName",
    "InvalidNumber",
    "MAX_DEPTH",
    "NestingTooDeep",
    "Param",
    "ParamType",
    "String",
    "Tuple",
    "Uint",
    "is_dynamic",
    "is_type_signature",
    "read",
]

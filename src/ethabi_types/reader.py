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


# This file turns a type signature like 'tuple(uint256,bytes)[]' into a
# ParamType tree.
#
# There is no tokenizer.  The last character of the string decides what we're
# looking at:
#
#   ']'  an array: peel off the rightmost [] or [N] and read what's left
#   ')'  a tuple: split 'tuple(...)' at its top-level commas and read each part
#   else an atom: address, bool, string, bytes, bytesN, intN, uintN
#
# Each step recurses on a strictly shorter substring, so parsing terminates.
# Nesting depth is capped at MAX_DEPTH to fail cleanly before Python's own
# recursion limit gets involved.

import functools
import logging
import re
from typing import Callable, Dict, List, Tuple

from .errors import Error, InvalidName, InvalidNumber, NestingTooDeep
from .paramtype import Address, Array, Bool, Bytes, FixedArray, FixedBytes, Int, ParamType, String, Uint, tuple_of

logger = logging.getLogger(__name__)

MAX_DEPTH = 128

TUPLE_OPEN = 'tuple('

_number_re = re.compile(r'[0-9]+')

_keyword_map: Dict[str, ParamType] = {
    'address': Address(),
    'bytes': Bytes(),
    'bool': Bool(),
    'string': String(),
    'int': Int(256),
    'uint': Uint(256),
}

# checked in order, after the keywords
_prefix_map: Tuple[Tuple[str, Callable[[int], ParamType]], ...] = (
    ('int', Int),
    ('uint', Uint),
    ('bytes', FixedBytes),
)


def parse_number(signature: str, digits: str) -> int:
    if _number_re.fullmatch(digits) is None:
        raise InvalidNumber(signature, digits)
    try:
        return int(digits)
    except ValueError as exc:  # more digits than int() will convert
        raise InvalidNumber(signature, digits) from exc


def read_atom(signature: str) -> ParamType:
    param_type = _keyword_map.get(signature)
    if param_type is not None:
        return param_type

    for prefix, factory in _prefix_map:
        if signature.startswith(prefix):
            return factory(parse_number(signature, signature[len(prefix):]))

    raise InvalidName(signature)


@functools.lru_cache()
def read(signature: str, max_depth: int = MAX_DEPTH) -> ParamType:
    """Convert a type signature to a ParamType

    Accepts atoms ('address', 'bool', 'string', 'bytes', 'bytes32', 'int8',
    'uint', ...), arrays of any type ('uint256[]', 'bool[3][]') and tuples
    ('tuple(address,bytes)'), nested arbitrarily.  No whitespace is allowed.

    :signature: the type signature, such as 'tuple(bool[3],bytes)'
    :max_depth: the maximum nesting of arrays and tuples

    :returns: the ParamType
    :raises InvalidName: if the signature doesn't follow the grammar
    :raises InvalidNumber: if a width or array length isn't a decimal number
    :raises NestingTooDeep: if the signature is nested more than max_depth deep
    """
    if not isinstance(signature, str):
        raise TypeError(f"Type signature must be 'str', not '{signature.__class__.__name__}'")

    logger.debug('reading %r', signature)

    def read_one(text: str, depth: int) -> ParamType:
        if depth > max_depth:
            raise NestingTooDeep(text, max_depth)

        last = text[-1:]
        if last == ']':
            return read_array(text, depth)
        elif last == ')':
            return read_tuple(text, depth)
        else:
            return read_atom(text)

    def read_array(text: str, depth: int) -> ParamType:
        opening = text.rfind('[')
        if opening == -1:
            raise InvalidName(text, 'Unmatched ]')

        num = text[opening + 1:-1]
        if not num:                                     # T[]
            return Array(read_one(text[:opening], depth + 1))
        else:                                           # T[N]
            length = parse_number(text, num)
            return FixedArray(read_one(text[:opening], depth + 1), length)

    def read_tuple(text: str, depth: int) -> ParamType:
        if not text.startswith(TUPLE_OPEN):
            raise InvalidName(text)

        item_types: List[ParamType] = []
        nested = 1
        start = pos = len(TUPLE_OPEN)
        end = len(text) - 1

        while pos <= end:
            if text.startswith(TUPLE_OPEN, pos):
                nested += 1
                if depth + nested - 1 > max_depth:      # fail before scanning it again, one level down
                    raise NestingTooDeep(text, max_depth)
                pos += len(TUPLE_OPEN)
                continue

            char = text[pos]
            if char == ')':
                nested -= 1
                if nested == 0:
                    # only the final ')' may close the outer tuple, so the
                    # counter can never go negative
                    if pos != end:
                        raise InvalidName(text, 'Unbalanced parentheses')
                    if item_types or pos > start:       # 'tuple()' has no members
                        item_types.append(read_one(text[start:pos], depth + 1))
            elif char == ',' and nested == 1:
                item_types.append(read_one(text[start:pos], depth + 1))
                start = pos + 1
            pos += 1

        if nested != 0:
            raise InvalidName(text, 'Unterminated tuple')

        return tuple_of(item_types)

    return read_one(signature, 0)


def is_type_signature(candidate: str) -> bool:
    try:
        read(candidate)
    except Error:
        return False
    return True

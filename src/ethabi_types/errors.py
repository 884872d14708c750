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


class Error(TypeError):
    """An exception raised when a type signature can't be read

    All errors from the reader derive from this class.  They are raised at the
    point of failure and never recovered from internally: no partial result is
    produced.

    :signature: the (sub)string that failed to parse
    """
    def __init__(self, signature: str, message: str):
        super().__init__(f"{message}: '{signature}'")
        self.signature = signature


class InvalidName(Error):
    """The text does not match any production of the type grammar"""
    def __init__(self, signature: str, message: str = 'Invalid type name'):
        super().__init__(signature, message)


class InvalidNumber(Error):
    """A width or length suffix is not an unsigned base-10 integer"""
    def __init__(self, signature: str, number: str):
        super().__init__(signature, f"Invalid number '{number}' in type")
        self.number = number


class NestingTooDeep(Error):
    def __init__(self, signature: str, max_depth: int):
        super().__init__(signature, f'Type nesting exceeds {max_depth} levels')
        self.max_depth = max_depth

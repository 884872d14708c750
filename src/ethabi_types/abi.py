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

import json
import logging
from typing import Any, Dict, List, Optional

from . import reader
from .paramtype import ParamType

logger = logging.getLogger(__name__)


class Param:
    """A named parameter of a function, constructor or event

    :name: the parameter name, possibly empty
    :kind: the ParamType read from the declared type
    :indexed: for event parameters, whether the value is a topic
    """
    __slots__ = 'name', 'kind', 'indexed'
    name: str
    kind: ParamType
    indexed: bool

    def __init__(self, name: str, kind: ParamType, indexed: bool = False):
        self.name = name
        self.kind = kind
        self.indexed = indexed

    def __repr__(self) -> str:
        if self.indexed:
            return f"Param({self.name!r}, {self.kind!r}, indexed=True)"
        return f"Param({self.name!r}, {self.kind!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Param):
            return (self.name, self.kind, self.indexed) == (other.name, other.kind, other.indexed)
        return False

    def __hash__(self) -> int:
        return hash((self.name, self.kind, self.indexed))


def component_signature(component: Dict[str, Any]) -> str:
    # JSON descriptions spell tuples as 'tuple' (or 'tuple[2][]') plus a list
    # of components, unless the members are already spelled out
    typestring = component['type']
    if typestring.startswith('tuple') and not typestring.startswith('tuple('):
        members = ','.join(component_signature(member) for member in component['components'])
        return f"tuple({members}){typestring[len('tuple'):]}"
    return typestring


def parse_param(component: Dict[str, Any]) -> Param:
    return Param(component.get('name', ''), reader.read(component_signature(component)))


def parse_event_param(component: Dict[str, Any]) -> Param:
    return Param(component.get('name', ''), reader.read(component_signature(component)),
                 bool(component.get('indexed', False)))


def parse_function(function: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "inputs": [parse_param(arg) for arg in function.get('inputs', [])],
        "outputs": [parse_param(arg) for arg in function.get('outputs', [])],
        "stateMutability": function.get('stateMutability', 'nonpayable'),
    }


def parse_event(event: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "inputs": [parse_event_param(arg) for arg in event.get('inputs', [])],
        "anonymous": bool(event.get('anonymous', False)),
    }


def parse_constructor(constructor: Dict[str, Any]) -> Dict[str, Any]:
    return {"inputs": [parse_param(arg) for arg in constructor.get('inputs', [])]}


def parse_entries(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    functions: Dict[str, List[Dict[str, Any]]] = {}
    events: Dict[str, List[Dict[str, Any]]] = {}
    constructor: Optional[Dict[str, Any]] = None

    for entry in entries:
        kind = entry.get('type', 'function')
        if kind == 'function':
            functions.setdefault(entry['name'], []).append(parse_function(entry))
        elif kind == 'event':
            events.setdefault(entry['name'], []).append(parse_event(entry))
        elif kind == 'constructor':
            constructor = parse_constructor(entry)
        else:
            logger.debug('skipping ABI entry of type %r', kind)

    return {"functions": functions, "events": events, "constructor": constructor}


def parse_json(text: str) -> Dict[str, Any]:
    """Read the parameter types declared by a JSON contract interface

    :text: the JSON text, a list of function, event and constructor entries

    :returns: a dict with 'functions', 'events' and 'constructor' keys.  Functions
              and events map each name to its overloads, in declaration order.
    """
    entries = json.loads(text)
    if not isinstance(entries, list):
        raise ValueError(f"ABI description must be a JSON list, not '{entries.__class__.__name__}'")
    return parse_entries(entries)

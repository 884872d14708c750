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

# Inspect type signatures from the command line:
#
#   python3 -m ethabi_types 'tuple(bool[3],bytes)' 'uint256[][2]'
#   python3 -m ethabi_types --abi contract.json

import argparse
import logging
import sys
from typing import List, Optional

from . import abi, errors, paramtype, reader

logger = logging.getLogger(__name__)


def print_params(title: str, params: List[abi.Param]) -> None:
    print(f'  {title}')
    for param in params:
        indexed = ' (indexed)' if param.indexed else ''
        print(f'    {param.name or "_"}: {param.kind!r}{indexed}')


def print_abi(path: str) -> None:
    logger.debug('loading ABI description from %s', path)
    with open(path) as file:
        description = abi.parse_json(file.read())

    if description['constructor'] is not None:
        print('constructor')
        print_params('inputs', description['constructor']['inputs'])

    for name, overloads in description['functions'].items():
        for function in overloads:
            print(f"function {name} ({function['stateMutability']})")
            print_params('inputs', function['inputs'])
            print_params('outputs', function['outputs'])

    for name, overloads in description['events'].items():
        for event in overloads:
            print(f"event {name}{' (anonymous)' if event['anonymous'] else ''}")
            print_params('inputs', event['inputs'])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='ethabi_types', description="Read contract ABI type signatures")
    parser.add_argument("--debug", action="store_true", help="Enable debugging")
    parser.add_argument("--dynamic", action="store_true", help="Show whether each type is dynamic")
    parser.add_argument("--max-depth", type=int, default=reader.MAX_DEPTH, help="Maximum nesting depth")
    parser.add_argument("--abi", metavar="FILE", help="Read the parameter types of a JSON ABI description")
    parser.add_argument("signatures", nargs="*", help="Type signatures, like 'tuple(bool[3],bytes)'")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(format="%(name)s-%(levelname)s: %(message)s")
        logging.getLogger().setLevel(level=logging.DEBUG)

    if not args.signatures and not args.abi:
        parser.error('nothing to read: give signatures or --abi')

    status = 0

    for signature in args.signatures:
        try:
            param_type = reader.read(signature, args.max_depth)
        except errors.Error as exc:
            print(f'{signature}: error: {exc}', file=sys.stderr)
            status = 1
            continue

        if args.dynamic:
            kind = 'dynamic' if paramtype.is_dynamic(param_type) else 'static'
            print(f'{signature}: {param_type!r} [{kind}]')
        else:
            print(f'{signature}: {param_type!r}')

    if args.abi:
        try:
            print_abi(args.abi)
        except (OSError, ValueError, KeyError, errors.Error) as exc:
            print(f'{args.abi}: error: {exc}', file=sys.stderr)
            status = 1

    return status


if __name__ == '__main__':
    sys.exit(main())

#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from fixed256.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('value', help='Value to check, in base 10')
    parser.add_argument('--signed', action='store_true', help='Parse as Int256 instead of Uint256')
    parser.add_argument('--radix', type=int, default=16, help='Extra radix to print the value in (2 to 36)')
    parser.add_argument('--json', action='store_true', help='Print the report as a JSON object')
    return parser


def execute(args: Namespace) -> int:
    from fixed256.exception import FormatError
    from fixed256.types import Int256, Uint256
    from fixed256.util import json_dumps

    type_: type[Uint256] | type[Int256] = Int256 if args.signed else Uint256
    try:
        value = type_.deserialize(args.value)
    except FormatError as e:
        print(f'Error: invalid value: {e.text!r}')
        return 1

    if not 2 <= args.radix <= 36:
        print('Error: radix must be between 2 and 36')
        return 1

    report = {
        'type': type_.__name__,
        'value': value.serialize(),
        'bits': value.bit_length(),
        'in_range': value.in_range(),
        f'base{args.radix}': value.to_str_radix(args.radix),
    }

    if args.json:
        print(json_dumps(report))
    else:
        for key, item in report.items():
            print(f'{key}: {item}')
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)

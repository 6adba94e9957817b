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
from typing import Literal

from structlog import get_logger

from fixed256.exception import FormatError
from fixed256.types import Int256, Uint256
from fixed256.utils.pydantic import BaseModel

logger = get_logger()

ArithOp = Literal['add', 'sub']


class UintArithResult(BaseModel):
    op: ArithOp
    a: Uint256
    b: Uint256
    result: Uint256


class IntArithResult(BaseModel):
    op: ArithOp
    a: Int256
    b: Int256
    result: Int256


def create_parser(op: ArithOp) -> ArgumentParser:
    from fixed256.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('a', help='Left operand, in base 10')
    parser.add_argument('b', help='Right operand, in base 10')
    parser.add_argument('--signed', action='store_true', help='Use Int256 instead of Uint256')
    parser.add_argument('--checked', action='store_true',
                        help=f'Use checked_{op} and report an overflow instead of crashing')
    parser.add_argument('--json', action='store_true', help='Print the result as a JSON object')
    return parser


def execute(args: Namespace, op: ArithOp) -> int:
    type_: type[Uint256] | type[Int256] = Int256 if args.signed else Uint256
    log = logger.new(op=op, type=type_.__name__)

    try:
        a = type_.deserialize(args.a)
        b = type_.deserialize(args.b)
    except FormatError as e:
        print(f'Error: invalid value: {e.text!r}')
        return 1
    log.debug('operands parsed', a=a.serialize(), b=b.serialize())

    if args.checked:
        result = a.checked_add(b) if op == 'add' else a.checked_sub(b)
        if result is None:
            log.info('operation has no result', a=a.serialize(), b=b.serialize())
            print('Error: overflow')
            return 1
    else:
        # XXX: RangeOverflow and NegativeUnsigned propagate and end the process
        result = a + b if op == 'add' else a - b

    if args.json:
        model = IntArithResult if args.signed else UintArithResult
        print(model(op=op, a=a, b=b, result=result).json_dumps())
    else:
        print(result.serialize())
    return 0

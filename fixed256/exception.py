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

"""
Exceptions raised by the fixed-width integer types.

There are two kinds of failure and they are handled very differently:

1. `FormatError` is raised when parsing text. It is a regular, recoverable error (it inherits from `ValueError`, which
   is also what makes pydantic report it as a validation error).
2. `RangeOverflow` and `NegativeUnsigned` are raised by the unchecked arithmetic operators when a result cannot be
   held by its type. They inherit from `BaseException`, NOT from `Exception`, so they pass through `except Exception`
   blocks and crash the caller. Code that needs to handle out-of-range results must use `checked_add`/`checked_sub`
   instead.

`RangeOverflow` is the bit-length check of `+` (both types) and of `-` on `Int256`. `NegativeUnsigned` is the failure
of the unsigned representation itself when `Uint256` subtraction goes below zero, there is no bit-length check there.
"""

from typing import final


class Fixed256Error(Exception):
    """Base class for the recoverable errors of this package."""


class FormatError(Fixed256Error, ValueError):
    """Raised when a text is not a valid base-10 integer for the target type."""

    def __init__(self, text: object) -> None:
        super().__init__(f'invalid format: {text!r}')
        self.text = text


ParseError = FormatError


@final
class RangeOverflow(BaseException):
    """Raised when the result of an unchecked operation exceeds the bit-length limit of its type.

    It cannot be subclassed and should not be caught.
    """

    def __init__(self, op: str, bits: int, max_bits: int) -> None:
        super().__init__(f'overflow on {op}: result has {bits} bits, limit is {max_bits}')
        self.op = op
        self.bits = bits
        self.max_bits = max_bits


@final
class NegativeUnsigned(BaseException):
    """Raised when an unchecked unsigned subtraction has a right operand greater than the left one.

    It cannot be subclassed and should not be caught.
    """

    def __init__(self, lhs: int, rhs: int) -> None:
        super().__init__(f'cannot subtract {rhs} from {lhs}: unsigned result would be negative')
        self.lhs = lhs
        self.rhs = rhs

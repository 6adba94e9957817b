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
Fixed-width integer types backed by Python's arbitrary-precision `int`.

There are two types:

- `Uint256`: unsigned, arithmetic results must have at most 256 bits, that is `0 <= value <= 2**256 - 1`
- `Int256`: signed, arithmetic results must have a magnitude of at most 255 bits

The bounds are only enforced by arithmetic. Plain construction and parsing accept any magnitude, so a value read from
an untrusted source has to be checked with `in_range()` or used with the checked operations.

The signed bound is a bit-length bound and not a two's-complement range: the smallest value is `-(2**255 - 1)`, since
`-(2**255)` has a 256-bit magnitude.

>>> Uint256(1) + Uint256(2)
Uint256(3)
>>> Uint256(UINT256_MAX).checked_add(Uint256(1)) is None
True
>>> Int256(-345) + Int256(44)
Int256(-301)
>>> Int256.deserialize('-301').serialize()
'-301'
"""

from typing import Any, ClassVar, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from structlog import get_logger
from typing_extensions import Self

from fixed256.exception import FormatError, NegativeUnsigned, RangeOverflow
from fixed256.utils.int import is_decimal, to_str_radix

logger = get_logger()

UINT256_MAX_BITS = 256
INT256_MAX_BITS = 255

UINT256_MAX = 2**UINT256_MAX_BITS - 1
INT256_MAX = 2**INT256_MAX_BITS - 1
INT256_MIN = -INT256_MAX


class _Fixed256:
    """ Base class for the immutable wrappers around an `int` with a bit-length limit on arithmetic results.

    It holds the wrapped value and delegates the read-only operations to it. Arithmetic is defined by each subclass.
    """

    __slots__ = ('_value',)

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _max_bits: ClassVar[int]
    _pattern: ClassVar[str]

    _value: int

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'expected int, got {type(value).__name__}')
        if not self._signed and value < 0:
            raise ValueError('unsigned integer cannot be negative')
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __reduce__(self) -> tuple[type[Self], tuple[int]]:
        return type(self), (self._value,)

    @property
    def value(self) -> int:
        """The wrapped integer."""
        return self._value

    def bit_length(self) -> int:
        """Number of bits of the magnitude, the sign is not counted."""
        return self._value.bit_length()

    def in_range(self) -> bool:
        """Whether the value could be the result of an arithmetic operation on this type."""
        return self._fits(self._value)

    def to_str_radix(self, radix: int) -> str:
        return to_str_radix(self._value, radix)

    @classmethod
    def _fits(cls, value: int) -> bool:
        return value.bit_length() <= cls._max_bits

    @classmethod
    def _bounded(cls, op: str, value: int) -> Self:
        """Wrap the result of an unchecked operation, raising `RangeOverflow` when it does not fit."""
        if not cls._fits(value):
            bits = value.bit_length()
            logger.critical('fixed-width integer overflow', type=cls.__name__, op=op, bits=bits,
                            max_bits=cls._max_bits)
            raise RangeOverflow(op, bits, cls._max_bits)
        return cls(value)

    def _require_same_type(self, other: object) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(f'expected {type(self).__name__}, got {type(other).__name__}')

    def serialize(self) -> str:
        """Canonical base-10 representation of the value."""
        return str(self._value)

    @classmethod
    def deserialize(cls, text: str) -> Self:
        """Parse a base-10 text. The result is not range checked.

        Raises `FormatError` if the text is not a plain base-10 integer for this type.
        """
        if not isinstance(text, str) or not is_decimal(text, signed=cls._signed):
            raise FormatError(text)
        try:
            value = int(text)
        except ValueError as e:
            # too many digits for int(), see sys.set_int_max_str_digits
            raise FormatError(text) from e
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_str_schema = core_schema.no_info_after_validator_function(cls.deserialize, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                from_str_schema,
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(cls.serialize, when_used='json'),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema,
                                     handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        json_schema = handler(schema)
        json_schema['pattern'] = cls._pattern
        return json_schema

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value})'

    def __str__(self) -> str:
        return self.serialize()

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value != other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value >= other._value


class Uint256(_Fixed256):
    """Unsigned integer, arithmetic results are limited to 256 bits.

    A negative value cannot be held at all: constructing one raises `ValueError`, and unchecked subtraction below zero
    raises the fatal `NegativeUnsigned`. Unchecked subtraction has no bit-length check, so it never raises
    `RangeOverflow`.
    """

    __slots__ = ()

    _signed = False
    _max_bits = UINT256_MAX_BITS
    _pattern = '^[0-9]+$'

    def __add__(self, other: object) -> Self:
        if not isinstance(other, Uint256):
            return NotImplemented
        return self._bounded('add', self._value + other._value)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, Uint256):
            return NotImplemented
        value = self._value - other._value
        if value < 0:
            # XXX: not a RangeOverflow, there is no bit-length check on unsigned subtraction
            logger.critical('negative unsigned result', type=type(self).__name__, op='sub', lhs=self._value,
                            rhs=other._value)
            raise NegativeUnsigned(self._value, other._value)
        return type(self)(value)

    def checked_add(self, other: 'Uint256') -> Optional[Self]:
        """Sum of both values, or `None` if it has more than 256 bits."""
        self._require_same_type(other)
        value = self._value + other._value
        if not self._fits(value):
            return None
        return type(self)(value)

    def checked_sub(self, other: 'Uint256') -> Optional[Self]:
        """Difference of both values, or `None` if `other` is greater than `self`."""
        self._require_same_type(other)
        if self._value < other._value:
            return None
        return type(self)(self._value - other._value)


class Int256(_Fixed256):
    """Signed integer, arithmetic results are limited to a 255-bit magnitude.

    Both unchecked addition and subtraction raise `RangeOverflow` when the limit is exceeded.
    """

    __slots__ = ()

    _signed = True
    _max_bits = INT256_MAX_BITS
    _pattern = '^-?[0-9]+$'

    def __add__(self, other: object) -> Self:
        if not isinstance(other, Int256):
            return NotImplemented
        return self._bounded('add', self._value + other._value)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, Int256):
            return NotImplemented
        return self._bounded('sub', self._value - other._value)

    def checked_add(self, other: 'Int256') -> Optional[Self]:
        """Sum of both values, or `None` if its magnitude has more than 255 bits."""
        self._require_same_type(other)
        value = self._value + other._value
        if not self._fits(value):
            return None
        return type(self)(value)

    def checked_sub(self, other: 'Int256') -> Optional[Self]:
        """Difference of both values, or `None` if its magnitude has more than 255 bits."""
        self._require_same_type(other)
        value = self._value - other._value
        if not self._fits(value):
            return None
        return type(self)(value)


__all__ = [
    'INT256_MAX',
    'INT256_MAX_BITS',
    'INT256_MIN',
    'UINT256_MAX',
    'UINT256_MAX_BITS',
    'Int256',
    'Uint256',
]

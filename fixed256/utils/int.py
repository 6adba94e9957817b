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

import re
import string

_DIGITS = string.digits + string.ascii_lowercase

_UNSIGNED_DECIMAL_RE = re.compile(r'[0-9]+', re.ASCII)
_SIGNED_DECIMAL_RE = re.compile(r'-?[0-9]+', re.ASCII)


def to_str_radix(n: int, radix: int) -> str:
    """
    Returns the representation of an integer in the given radix, using lowercase letters for digits above 9.

    >>> to_str_radix(0, 2)
    '0'
    >>> to_str_radix(255, 16)
    'ff'
    >>> to_str_radix(-255, 16)
    '-ff'
    >>> to_str_radix(35, 36)
    'z'
    >>> to_str_radix(1234, 10)
    '1234'
    >>> to_str_radix(2**64, 36)
    '3w5e11264sgsg'
    >>> to_str_radix(10, 1)
    Traceback (most recent call last):
     ...
    ValueError: radix must be between 2 and 36
    """
    if not 2 <= radix <= 36:
        raise ValueError('radix must be between 2 and 36')
    if radix == 10:
        return str(n)
    if n == 0:
        return '0'

    magnitude = abs(n)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, radix)
        digits.append(_DIGITS[digit])
    if n < 0:
        digits.append('-')
    return ''.join(reversed(digits))


def is_decimal(text: str, *, signed: bool) -> bool:
    """
    Check whether a text is a plain base-10 integer: ASCII digits only, with an optional leading '-' when signed.

    Signs other than '-', whitespace and digit separators are not accepted, even though `int()` accepts them.

    >>> is_decimal('0', signed=False)
    True
    >>> is_decimal('007', signed=False)
    True
    >>> is_decimal('-1', signed=False)
    False
    >>> is_decimal('-1', signed=True)
    True
    >>> is_decimal('+1', signed=True)
    False
    >>> is_decimal('', signed=True)
    False
    >>> is_decimal('-', signed=True)
    False
    >>> is_decimal(' 1', signed=False)
    False
    >>> is_decimal('1_000', signed=False)
    False
    """
    pattern = _SIGNED_DECIMAL_RE if signed else _UNSIGNED_DECIMAL_RE
    return pattern.fullmatch(text) is not None

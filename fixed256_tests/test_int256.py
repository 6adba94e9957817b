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

import pytest
from structlog.testing import capture_logs

from fixed256.exception import RangeOverflow
from fixed256.types import INT256_MAX, INT256_MIN, Int256

BIGGEST = Int256(INT256_MAX)
SMALLEST = Int256(INT256_MIN)


def test_bounds():
    assert INT256_MAX == 2**255 - 1
    assert INT256_MIN == -(2**255 - 1)
    assert BIGGEST.bit_length() == 255
    assert SMALLEST.bit_length() == 255


def test_checked():
    assert BIGGEST.checked_add(Int256(64)) is None, 'should return None adding 64 to biggest'
    assert BIGGEST.checked_add(Int256(1)) is None, 'should return None adding 1 to biggest'
    assert BIGGEST.checked_add(Int256(0)) == BIGGEST, 'should return Some adding 0 to biggest'
    assert SMALLEST.checked_sub(Int256(1)) is None, 'should return None subtracting 1 from smallest'
    assert SMALLEST.checked_sub(Int256(0)) == SMALLEST, 'should return Some subtracting 0 from smallest'
    assert SMALLEST.checked_add(Int256(-1)) is None
    assert BIGGEST.checked_sub(Int256(-1)) is None
    assert Int256(345).checked_sub(Int256(44)) == Int256(301), '345 - 44 should = 301'
    assert Int256(44).checked_sub(Int256(345)) == Int256(-301)


def test_bit_length_bound_is_not_twos_complement():
    # -2**255 fits a two's-complement 256-bit integer, but its magnitude has 256 bits
    assert SMALLEST.checked_sub(Int256(1)) is None
    assert Int256(-(2**254)).checked_add(Int256(-(2**254))) is None
    assert Int256(-(2**254)).checked_add(Int256(-(2**254) + 1)) == SMALLEST


def test_unchecked():
    assert SMALLEST - Int256(0) == SMALLEST, 'should return smallest for subtracting 0 from smallest'
    assert BIGGEST + Int256(0) == BIGGEST, 'should return biggest for adding 0 to biggest'
    assert int(Int256(345) - Int256(44)) == 301, '345 - 44 should = 301'
    assert int(Int256(-345) + Int256(44)) == -301, '-345 + 44 should = -301'
    assert BIGGEST + SMALLEST == Int256(0)


@pytest.mark.parametrize('a, b, op', [
    (INT256_MAX, 1, 'add'),
    (INT256_MIN, -1, 'add'),
    (INT256_MIN, 1, 'sub'),
    (INT256_MAX, -1, 'sub'),
    (INT256_MAX, INT256_MAX, 'add'),
])
def test_unchecked_overflow(a, b, op):
    x, y = Int256(a), Int256(b)
    with capture_logs() as logs:
        with pytest.raises(RangeOverflow) as exc_info:
            if op == 'add':
                x + y
            else:
                x - y

    assert exc_info.value.op == op
    assert exc_info.value.bits > 255
    assert exc_info.value.max_bits == 255
    assert len(logs) == 1
    assert logs[0]['log_level'] == 'critical'
    assert logs[0]['type'] == 'Int256'
    assert logs[0]['op'] == op


@pytest.mark.parametrize('a, b', [
    (0, 0),
    (345, 44),
    (-345, 44),
    (2**254, -(2**253)),
    (INT256_MIN, 0),
    (2**200, -(2**201)),
])
def test_unchecked_agrees_with_checked(a, b):
    x, y = Int256(a), Int256(b)
    assert x + y == x.checked_add(y)
    assert x - y == x.checked_sub(y)


def test_construction_has_no_range_check():
    too_small = Int256(-(2**255))
    assert too_small.bit_length() == 256
    assert not too_small.in_range()
    assert SMALLEST.in_range()
    assert Int256(-1).in_range()


def test_read_through():
    x = Int256(-255)
    assert x.value == -255
    assert int(x) == -255
    assert x.bit_length() == 8
    assert x.to_str_radix(16) == '-ff'
    assert format(x, 'x') == '-ff'
    assert str(x) == '-255'
    assert repr(x) == 'Int256(-255)'
    assert Int256(-1) < Int256(0) < Int256(1)


def test_does_not_mix_with_uint256():
    from fixed256.types import Uint256

    assert Int256(1) != Uint256(1)
    with pytest.raises(TypeError):
        Int256(1) + Uint256(1)  # type: ignore[operator]
    with pytest.raises(TypeError):
        Int256(1).checked_sub(Uint256(1))  # type: ignore[arg-type]

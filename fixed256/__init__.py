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
This module exports the fixed-width integer types and their errors.
"""

from fixed256.exception import Fixed256Error, FormatError, NegativeUnsigned, ParseError, RangeOverflow
from fixed256.types import INT256_MAX, INT256_MIN, UINT256_MAX, Int256, Uint256
from fixed256.version import __version__

__all__ = [
    'Fixed256Error',
    'FormatError',
    'INT256_MAX',
    'INT256_MIN',
    'Int256',
    'NegativeUnsigned',
    'ParseError',
    'RangeOverflow',
    'UINT256_MAX',
    'Uint256',
    '__version__',
]

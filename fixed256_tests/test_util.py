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

import json

import pytest

from fixed256.util import json_dumpb, json_dumps, json_loadb


def test_json_dumps_is_compact():
    assert json_dumps({'a': '1', 'b': [1, 2]}) == '{"a":"1","b":[1,2]}'
    assert json_dumps({'name': 'ação'}) == '{"name":"ação"}'
    assert json_dumpb({'a': '1'}) == b'{"a":"1"}'


def test_json_loadb():
    assert json_loadb(b'{"uint":"234","int":"333"}') == {'uint': '234', 'int': '333'}


def test_json_loadb_invalid_utf8():
    with pytest.raises(json.JSONDecodeError):
        json_loadb(b'{"a":"\xff"}')

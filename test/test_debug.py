# limdict: bounded least-recently-used dictionary
#
# Copyright 2025 The limdict authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import pytest

from limdict import DebugView, InvalidArgumentError, LimitedDict


def test_missing_mapping():
    with pytest.raises(InvalidArgumentError):
        DebugView(None)


def test_plain_mapping():
    view = DebugView({'a': 'A', 'b': 'B'})
    assert len(view) == 2
    assert view.items == [('a', 'A'), ('b', 'B')]


def test_limited_dict_snapshot():
    d = LimitedDict(2)
    d.add('a', 'A')
    d.add('b', 'B')
    view = DebugView(d)
    items = view.items
    assert len(items) == len(d) == 2
    assert sorted(items) == [('a', 'A'), ('b', 'B')]

    # Snapshot is detached and inspection does not touch.
    d.add('c', 'C')
    assert sorted(items) == [('a', 'A'), ('b', 'B')]
    assert sorted(view.items) == [('b', 'B'), ('c', 'C')]

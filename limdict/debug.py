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
'''
Snapshot helper for inspecting dictionaries in a debugger or REPL.
'''

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from .errors import InvalidArgumentError


__all__ = ['DebugView']


K = TypeVar('K')
V = TypeVar('V')


class DebugView(Generic[K, V]):
    '''
    Read-only snapshot view of a mapping.

    Reading :attr:`items` never touches recency, so inspecting a
    :class:`~limdict.LimitedDict` does not change what it evicts next.
    '''
    def __init__(self, mapping: Mapping[K, V]):
        if mapping is None:
            raise InvalidArgumentError('mapping')
        self._mapping = mapping

    @property
    def items(self) -> list[tuple[K, V]]:
        '''Fresh list of ``(key, value)`` pairs.'''
        copy_to: Any = getattr(self._mapping, 'copy_to', None)
        if copy_to is None:
            return list(self._mapping.items())
        snapshot: list[Any] = [None] * len(self._mapping)
        copy_to(snapshot, 0)
        return snapshot

    def __len__(self) -> int:
        return len(self._mapping)

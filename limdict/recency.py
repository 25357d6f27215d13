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
Recency tracking for least-recently-used eviction.

Every touch assigns a key the next value of a monotonically increasing
sequence token. Two indices are kept in sync: the forward index maps
tokens to keys and the reverse index maps keys to their current token.
Since new tokens are always larger than every live token, the forward
index stays sorted by token simply by appending, and its first entry is
the least recently touched key.
'''

from collections import OrderedDict
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar, final


__all__ = ['RecencyTracker']


K = TypeVar('K', bound=Hashable)


@final
class RecencyTracker(Generic[K]):
    '''
    Bidirectional token index over a set of live keys.

    The tracker holds keys only. It neither knows about values nor
    enforces a capacity; both are the owner's business.
    '''
    _fwd: OrderedDict[int, K]
    _rev: dict[K, int]
    _next: int

    def __init__(self):
        self._fwd = OrderedDict[int, K]()
        self._rev = {}
        self._next = 0

    @property
    def next_token(self) -> int:
        '''Token that the next call to :meth:`touch` will assign.'''
        return self._next

    def touch(self, key: K) -> int:
        '''
        Mark a key as most recently touched.

        Any previous token of the key is retracted first. Returns the
        newly assigned token.
        '''
        old = self._rev.pop(key, None)
        if old is not None:
            del self._fwd[old]
        token = self._next
        self._fwd[token] = key
        self._rev[key] = token
        self._next += 1
        return token

    def untrack(self, key: K) -> int:
        '''
        Stop tracking a key and return its retracted token.

        :raise KeyError: The key is not tracked.
        '''
        token = self._rev.pop(key)
        del self._fwd[token]
        return token

    def oldest(self) -> K:
        '''
        Return the least recently touched key.

        :raise IndexError: The tracker is empty.
        '''
        try:
            return next(iter(self._fwd.values()))
        except StopIteration:
            raise IndexError('oldest() on empty tracker') from None

    def token_of(self, key: K) -> int:
        return self._rev[key]

    def key_of(self, token: int) -> K:
        return self._fwd[token]

    def clear(self) -> None:
        '''Forget all keys and restart the token sequence at zero.'''
        self._fwd.clear()
        self._rev.clear()
        self._next = 0

    def items(self) -> Iterator[tuple[int, K]]:
        '''Iterate over ``(token, key)`` pairs in ascending token order.'''
        return iter(self._fwd.items())

    def __contains__(self, key: object) -> bool:
        return key in self._rev

    def __iter__(self) -> Iterator[K]:
        return iter(self._fwd.values())

    def __len__(self) -> int:
        return len(self._rev)

    def __repr__(self) -> str:
        return f'RecencyTracker({list(self._fwd.values())!r})'

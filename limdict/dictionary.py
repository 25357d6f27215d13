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
Dictionary with a fixed capacity and least-recently-used eviction.
'''

from collections.abc import (
    Hashable,
    ItemsView,
    Iterator,
    KeysView,
    MutableMapping,
    MutableSequence,
    ValuesView,
)
import logging
import threading
from typing import Any, Optional, TypeVar, final

from .debug import DebugView
from .errors import DuplicateKeyError, InvalidArgumentError
from .recency import RecencyTracker


__all__ = ['LimitedDict']


K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


logger = logging.getLogger(__name__)


@final
class LimitedDict(MutableMapping[K, V]):
    '''
    Mapping that holds at most `capacity` entries.

    Inserting into a full dictionary first evicts the entry that was
    touched least recently. Insertion and every successful lookup
    through :meth:`__getitem__`, :meth:`try_get`, :meth:`get` or
    :meth:`get_or_add` count as a touch. Membership tests, iteration,
    the views returned by :meth:`keys`, :meth:`values` and
    :meth:`items`, and :meth:`copy_to` do not.

    Insertion never overwrites. Assigning to a key that is already
    present raises :class:`DuplicateKeyError`, both through
    :meth:`add` and through ``d[key] = value``.

    Instances are not thread-safe. Callers sharing an instance should
    serialize access through :attr:`sync_root`.

    Parameters
    ----------
    capacity : int
        Maximum number of entries. Must be strictly positive.
    '''
    _items: dict[K, V]
    _recency: RecencyTracker[K]
    _capacity: int
    _sync_root: Any

    _sync_guard = threading.Lock()

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError('capacity', 'must be an integer')
        if capacity <= 0:
            raise InvalidArgumentError('capacity', 'must be positive')
        self._items = {}
        self._recency = RecencyTracker[K]()
        self._capacity = capacity
        self._sync_root = None

    @property
    def capacity(self) -> int:
        '''Maximum number of entries.'''
        return self._capacity

    @property
    def is_full(self) -> bool:
        '''Indicates that the next insertion will evict an entry.'''
        return len(self._recency) >= self._capacity

    @property
    def recency(self) -> RecencyTracker[K]:
        '''
        Recency tracker of this dictionary.

        Exposed for inspection. Mutating the tracker directly breaks
        the dictionary.
        '''
        return self._recency

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def is_fixed_size(self) -> bool:
        return False

    @property
    def is_synchronized(self) -> bool:
        return False

    @property
    def sync_root(self) -> Any:
        '''
        Lock for external synchronization.

        Created on first access. The same object is returned on every
        subsequent access. The dictionary never acquires it itself.
        '''
        if self._sync_root is None:
            with LimitedDict._sync_guard:
                if self._sync_root is None:
                    self._sync_root = threading.RLock()
        return self._sync_root

    def add(self, key: K, value: V) -> None:
        '''
        Insert a new entry, evicting the least recently touched entry if
        the dictionary is full.

        :raise InvalidArgumentError: `key` or `value` is `None`.
        :raise DuplicateKeyError: `key` is already present. Nothing is
            evicted in this case.
        '''
        if key is None:
            raise InvalidArgumentError('key')
        if value is None:
            raise InvalidArgumentError('value')
        if key in self._items:
            raise DuplicateKeyError(key)
        if self.is_full:
            self._evict()
        self._items[key] = value
        self._recency.touch(key)

    def add_item(self, item: tuple[K, V]) -> None:
        '''Insert a ``(key, value)`` pair. See :meth:`add`.'''
        key, value = item
        self.add(key, value)

    def try_get(self, key: K) -> tuple[bool, Optional[V]]:
        '''
        Look up a key without raising on a miss.

        Returns ``(True, value)`` and touches the key if it is present,
        ``(False, None)`` otherwise.

        :raise InvalidArgumentError: `key` is `None`.
        '''
        if key is None:
            raise InvalidArgumentError('key')
        if key not in self._items:
            return False, None
        return True, self[key]

    def get_or_add(self, key: K, value: V) -> V:
        '''
        Return the value for `key`, inserting `value` first if the key
        is absent. Always touches the key.
        '''
        if key not in self._items:
            self.add(key, value)
        return self[key]

    def setdefault(self, key: K, default: Optional[V] = None) -> V:
        return self.get_or_add(key, default)  # type: ignore[arg-type]

    def remove(self, key: K) -> bool:
        '''Remove an entry. Returns `False` if `key` was absent.'''
        if key not in self._items:
            return False
        del self._items[key]
        self._recency.untrack(key)
        return True

    def remove_item(self, item: tuple[K, V]) -> bool:
        '''Remove the entry with the key of a ``(key, value)`` pair.'''
        key, _ = item
        return self.remove(key)

    def contains_key(self, key: K) -> bool:
        return key in self._items

    def contains_item(self, item: tuple[K, V]) -> bool:
        key, value = item
        return key in self._items and self._items[key] == value

    def clear(self) -> None:
        self._items.clear()
        self._recency.clear()
        logger.debug(f'cleared dictionary of capacity {self._capacity}')

    def copy_to(self, array: MutableSequence[tuple[K, V]],
                index: int = 0) -> None:
        '''
        Copy ``(key, value)`` pairs into a sequence.

        Pairs are written in iteration order starting at position
        `index`. Existing elements of `array` are overwritten.

        :raise InvalidArgumentError: `array` is `None` or too short to
            hold all entries from `index` onward.
        :raise IndexError: `index` is outside ``[0, len(array)]``.
        '''
        if array is None:
            raise InvalidArgumentError('array')
        if index < 0 or index > len(array):
            raise IndexError(f'index {index} out of range')
        if len(array) - index < len(self._items):
            raise InvalidArgumentError(
                'array', f'room for {len(array) - index} entries, '
                f'{len(self._items)} required'
            )
        for pos, item in enumerate(self._items.items(), start=index):
            array[pos] = item

    def keys(self) -> KeysView[K]:
        return self._items.keys()

    def values(self) -> ValuesView[V]:
        return self._items.values()

    def items(self) -> ItemsView[K, V]:
        return self._items.items()

    def _evict(self) -> None:
        key = self._recency.oldest()
        token = self._recency.untrack(key)
        del self._items[key]
        logger.debug(f'evicted {key!r} (token {token})')

    def __getitem__(self, key: K) -> V:
        value = self._items[key]
        self._recency.touch(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.add(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (f'{type(self).__name__}({self._capacity}, '
                f'{DebugView(self).items!r})')

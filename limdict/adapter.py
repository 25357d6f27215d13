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
Untyped access to limited dictionaries.

:class:`UntypedView` serves callers that hand over arbitrary objects as
keys and values. It checks them against the key and value types given
at construction and translates mismatches, which a typed caller could
never produce, into argument errors or neutral results.
'''

from collections.abc import (
    Hashable,
    Iterator,
    KeysView,
    MutableSequence,
    ValuesView,
)
from typing import Any, Optional

from .dictionary import LimitedDict
from .errors import ArgumentTypeError, InvalidArgumentError


__all__ = ['UntypedView']


TypeSpec = type | tuple[type, ...]


class UntypedView:
    '''
    Type-checking wrapper around a :class:`~limdict.LimitedDict`.

    Reads of missing or mistyped keys give `None` instead of raising,
    unlike item access on the dictionary itself.
    Iteration yields ``(key, value)`` pairs.

    Parameters
    ----------
    target : LimitedDict
        Wrapped dictionary. All state lives here.
    key_type : type or tuple of types
        Accepted key type(s), as for :func:`isinstance`.
    value_type : type or tuple of types
        Accepted value type(s), as for :func:`isinstance`.
    '''
    def __init__(self, target: LimitedDict, key_type: TypeSpec = object,
                 value_type: TypeSpec = object):
        if target is None:
            raise InvalidArgumentError('target')
        self._target = target
        self._key_type = key_type
        self._value_type = value_type

    @property
    def target(self) -> LimitedDict:
        return self._target

    @property
    def is_read_only(self) -> bool:
        return self._target.is_read_only

    @property
    def is_fixed_size(self) -> bool:
        return self._target.is_fixed_size

    @property
    def is_synchronized(self) -> bool:
        return self._target.is_synchronized

    @property
    def sync_root(self) -> Any:
        return self._target.sync_root

    def _is_key(self, key: Any) -> bool:
        return (key is not None and isinstance(key, self._key_type)
                and isinstance(key, Hashable))

    def add(self, key: Any, value: Any) -> None:
        '''
        Insert an entry into the wrapped dictionary.

        :raise InvalidArgumentError: `key` or `value` is `None`.
        :raise ArgumentTypeError: `key` or `value` has the wrong type, or
            `key` is unhashable.
        :raise DuplicateKeyError: `key` is already present.
        '''
        if key is None:
            raise InvalidArgumentError('key')
        if value is None:
            raise InvalidArgumentError('value')
        if not isinstance(key, self._key_type):
            raise ArgumentTypeError('key', f'unexpected type '
                                    f'{type(key).__name__}')
        if not isinstance(key, Hashable):
            raise ArgumentTypeError('key', f'unhashable type '
                                    f'{type(key).__name__}')
        if not isinstance(value, self._value_type):
            raise ArgumentTypeError('value', f'unexpected type '
                                    f'{type(value).__name__}')
        self._target.add(key, value)

    def contains(self, key: Any) -> bool:
        '''
        Membership test. Mistyped keys are never contained.

        :raise InvalidArgumentError: `key` is `None`.
        '''
        if key is None:
            raise InvalidArgumentError('key')
        return self._is_key(key) and self._target.contains_key(key)

    def remove(self, key: Any) -> None:
        '''
        Remove an entry. Mistyped and missing keys are ignored.

        :raise InvalidArgumentError: `key` is `None`.
        '''
        if key is None:
            raise InvalidArgumentError('key')
        if self._is_key(key):
            self._target.remove(key)

    def clear(self) -> None:
        self._target.clear()

    def keys(self) -> KeysView:
        return self._target.keys()

    def values(self) -> ValuesView:
        return self._target.values()

    def copy_to(self, array: MutableSequence, index: int = 0) -> None:
        self._target.copy_to(array, index)

    def __getitem__(self, key: Any) -> Optional[Any]:
        if not self._is_key(key):
            return None
        _, value = self._target.try_get(key)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.add(key, value)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator:
        return iter(self._target.items())

    def __len__(self) -> int:
        return len(self._target)

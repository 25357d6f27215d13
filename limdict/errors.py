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
Exception types raised by limited dictionaries.
'''

from typing import Any


__all__ = [
    'ArgumentTypeError',
    'DuplicateKeyError',
    'InvalidArgumentError',
    'LimdictError',
]


class LimdictError(Exception):
    '''Base class for all errors raised by this package.'''


class InvalidArgumentError(LimdictError, ValueError):
    '''
    An argument was rejected.

    The message is the name of the offending parameter, which is also
    available as :attr:`param`.
    '''
    def __init__(self, param: str, msg: str | None = None):
        super().__init__(param if msg is None else f'{param}: {msg}')
        self.param = param


class ArgumentTypeError(InvalidArgumentError, TypeError):
    '''An untyped argument does not have the expected type.'''


class DuplicateKeyError(LimdictError, KeyError):
    '''Insertion of a key that is already present.'''
    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'duplicate key {self.key!r}'

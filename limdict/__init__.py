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
Fixed-capacity dictionaries with least-recently-used eviction.
'''

from .adapter import UntypedView
from .debug import DebugView
from .dictionary import LimitedDict
from .errors import (
    ArgumentTypeError,
    DuplicateKeyError,
    InvalidArgumentError,
    LimdictError,
)
from .recency import RecencyTracker

__all__ = [
    'ArgumentTypeError',
    'DebugView',
    'DuplicateKeyError',
    'InvalidArgumentError',
    'LimdictError',
    'LimitedDict',
    'RecencyTracker',
    'UntypedView',
]

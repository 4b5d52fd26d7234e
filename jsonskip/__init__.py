# coding=utf-8
# Copyright 2026 The jsonskip Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Init file for the `jsonskip` package."""

from jsonskip._src.exclusion import ExclusionPolicy
from jsonskip._src.exclusion import ExclusionStrategy
from jsonskip._src.exclusion import FieldAttributes
from jsonskip._src.exclusion import type_name
from jsonskip._src.serializer import new_serializer
from jsonskip._src.serializer import Serializer
from jsonskip._src.serializer import SerializerBuilder
from jsonskip.version import __version__

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

"""Reflection over object graphs, and registration of custom node types."""

# pylint: disable=unused-import
from jsonskip._src.fields import DataclassType
from jsonskip._src.fields import declaring_class
from jsonskip._src.fields import default_registry
from jsonskip._src.fields import Field
from jsonskip._src.fields import find_node_traverser
from jsonskip._src.fields import Index
from jsonskip._src.fields import is_namedtuple_subclass
from jsonskip._src.fields import is_traversable_type
from jsonskip._src.fields import Key
from jsonskip._src.fields import NamedTupleType
from jsonskip._src.fields import NodeKind
from jsonskip._src.fields import NodeTraverser
from jsonskip._src.fields import NodeTraverserRegistry
from jsonskip._src.fields import ObjectType
from jsonskip._src.fields import Path
from jsonskip._src.fields import path_str
from jsonskip._src.fields import PathElement
from jsonskip._src.fields import register_node_traverser

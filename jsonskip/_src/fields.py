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

"""Reflection over the values a serializer converts.

Every traversable value is one of three node kinds: an OBJECT with named
fields, a MAPPING with keys, or a SEQUENCE with positions. A
`NodeTraverser` flattens a node into its children and the path elements that
lead to them; `NodeTraverserRegistry` finds the traverser for a type.
"""

import abc
import collections
import dataclasses
import enum
import inspect
import types
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type


class PathElement(metaclass=abc.ABCMeta):
  """Element of a path."""

  @property
  @abc.abstractmethod
  def code(self) -> str:
    """Generates code for accessing this path."""
    raise NotImplementedError()


@dataclasses.dataclass(frozen=True)
class Index(PathElement):
  """An index into a sequence (list, tuple or set)."""
  index: int

  @property
  def code(self) -> str:
    return f'[{self.index}]'


@dataclasses.dataclass(frozen=True)
class Key(PathElement):
  """A key of a mapping (e.g., dict)."""
  key: Any

  @property
  def code(self) -> str:
    return f'[{self.key!r}]'


@dataclasses.dataclass(frozen=True)
class Field(PathElement):
  """A named field of an object, and the class that declares it."""
  name: str
  declaring_class: Type[Any]

  @property
  def code(self) -> str:
    return f'.{self.name}'


Path = Tuple[PathElement, ...]


def path_str(path: Path) -> str:
  return '<root>' + ''.join(x.code for x in path)


class NodeKind(enum.Enum):
  """How a traversable node is rendered in JSON."""
  OBJECT = 1  # Named fields, rendered as a JSON object.
  MAPPING = 2  # Arbitrary keys, rendered as a JSON object.
  SEQUENCE = 3  # Positions, rendered as a JSON array.


class NamedTupleType:
  pass


class DataclassType:
  pass


class ObjectType:
  """Stands in for any other object that carries a `__dict__` or slots."""


# Values of these types are JSON leaves and are never traversed.
_LEAF_TYPES = (
    bool,
    int,
    float,
    str,
    type(None),
)

# Neither leaves nor traversable, even though their instances have a `__dict__`.
_OPAQUE_TYPES = (
    enum.Enum,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)

FlattenFn = Callable[[Any], Tuple[Any, ...]]
PathElementsFn = Callable[[Any], Tuple[PathElement, ...]]


@dataclasses.dataclass(frozen=True)
class NodeTraverser:
  """Contains information required to traverse a given node type."""
  kind: NodeKind
  flatten: FlattenFn
  path_elements: PathElementsFn


class NodeTraverserRegistry:
  """A registry of `NodeTraverser`s."""

  def __init__(self):
    self._node_traversers: Dict[Type[Any], NodeTraverser] = {}

  def register_node_traverser(
      self,
      node_type: Type[Any],
      kind: NodeKind,
      flatten_fn: FlattenFn,
      path_elements_fn: PathElementsFn,
  ) -> None:
    """Registers a node traverser for `node_type`.

    Args:
      node_type: The node type to register a traverser for. Subclasses of
        `node_type` without a traverser of their own use this one too.
      kind: How nodes of this type are rendered.
      flatten_fn: Accepts an instance of `node_type` and returns a tuple of
        its child values.
      path_elements_fn: Accepts an instance of `node_type` and returns the
        `PathElement`s aligned with the values returned by `flatten_fn`. For
        `NodeKind.OBJECT` these must be `Field` elements, for
        `NodeKind.MAPPING` `Key` elements.
    """
    if not isinstance(node_type, type):
      raise TypeError(f'`node_type` ({node_type}) must be a type.')
    if node_type in self._node_traversers:
      raise ValueError(
          f'A node traverser for {node_type} has already been registered.')
    self._node_traversers[node_type] = NodeTraverser(
        kind=kind,
        flatten=flatten_fn,
        path_elements=path_elements_fn,
    )

  def find_node_traverser(
      self,
      node_type: Type[Any],
  ) -> Optional[NodeTraverser]:
    """Finds a `NodeTraverser` for the given `node_type`.

    The lookup tries, in order: `node_type` itself; `NamedTupleType` for
    `NamedTuple` classes; `DataclassType` for dataclasses; the closest
    registered base class; and finally `ObjectType` for any other class whose
    instances carry attributes.

    Args:
      node_type: The node type to find a traverser for.

    Returns:
      A `NodeTraverser` instance for `node_type`, if it exists, else `None`.
    """
    if not isinstance(node_type, type):
      raise TypeError(f'`node_type` ({node_type}) must be a type.')
    traverser = self._node_traversers.get(node_type)
    if traverser is not None:
      return traverser
    if issubclass(node_type, _LEAF_TYPES + _OPAQUE_TYPES):
      return None
    if is_namedtuple_subclass(node_type):
      return self._node_traversers.get(NamedTupleType)
    if dataclasses.is_dataclass(node_type):
      return self._node_traversers.get(DataclassType)
    for base in node_type.__mro__[1:]:
      if base is not object and base in self._node_traversers:
        return self._node_traversers[base]
    if _has_attributes(node_type):
      return self._node_traversers.get(ObjectType)
    return None

  def is_traversable_type(self, node_type: Type[Any]) -> bool:
    """Returns whether `node_type` can be traversed."""
    return self.find_node_traverser(node_type) is not None


def is_namedtuple_subclass(type_: Type[Any]) -> bool:
  return (
      issubclass(type_, tuple) and
      hasattr(type_, '_asdict') and
      hasattr(type_, '_fields') and
      all(isinstance(f, str) for f in type_._fields)
  )  # pyformat: disable


def _own_slots(cls: Type[Any]) -> Tuple[str, ...]:
  slots = cls.__dict__.get('__slots__', ())
  if isinstance(slots, str):
    slots = (slots,)
  return tuple(name for name in slots if name not in ('__dict__', '__weakref__'))


def _has_attributes(cls: Type[Any]) -> bool:
  return '__dict__' in dir(cls) or any(_own_slots(base) for base in cls.__mro__)


def _assigned_in_init(cls: Type[Any], name: str) -> bool:
  init = cls.__dict__.get('__init__')
  code = getattr(init, '__code__', None)
  return code is not None and name in code.co_names


def declaring_class(cls: Type[Any], name: str) -> Type[Any]:
  """Returns the class along `cls.__mro__` that declares field `name`.

  A field is declared by the first class whose own annotations or own
  `__slots__` mention it. A plain instance attribute, which no class body
  declares, belongs to the most basic class whose own `__init__` assigns it,
  so an attribute set up by a base class stays declared by that base class in
  its subclasses. Attributes assigned nowhere in an `__init__` belong to `cls`.

  Args:
    cls: The runtime class of the object holding the field.
    name: The field name.
  """
  for klass in cls.__mro__:
    if klass is object:
      break
    if name in _own_slots(klass):
      return klass
    try:
      annotations = inspect.get_annotations(klass)
    except NameError:
      annotations = klass.__dict__.get('__annotations__', {})
    if name in annotations:
      return klass
  for klass in reversed(cls.__mro__):
    if klass is not object and _assigned_in_init(klass, name):
      return klass
  return cls


def _is_field_name(name: str) -> bool:
  return not name.startswith('__')


def _object_field_names(value: Any) -> List[str]:
  """Lists the names of the fields of `value`, in declaration order."""
  names: List[str] = []
  cls = type(value)
  if dataclasses.is_dataclass(cls):
    names.extend(
        f.name for f in dataclasses.fields(value) if hasattr(value, f.name))
  for klass in reversed(cls.__mro__):
    names.extend(
        name for name in _own_slots(klass)
        if name not in names and hasattr(value, name))
  instance_dict = getattr(value, '__dict__', None)
  if isinstance(instance_dict, dict):
    names.extend(name for name in instance_dict if name not in names)
  return [name for name in names if _is_field_name(name)]


def _flatten_object(value: Any) -> Tuple[Any, ...]:
  return tuple(getattr(value, name) for name in _object_field_names(value))


def _object_path_elements(value: Any) -> Tuple[Field, ...]:
  cls = type(value)
  return tuple(
      Field(name, declaring_class(cls, name))
      for name in _object_field_names(value))


def _namedtuple_path_elements(value: Any) -> Tuple[Field, ...]:
  cls = type(value)
  return tuple(Field(name, declaring_class(cls, name)) for name in cls._fields)


# The default registry of node traversers.
_default_traverser_registry = NodeTraverserRegistry()

# Forward functions from the module level to the default registry.
register_node_traverser = _default_traverser_registry.register_node_traverser
find_node_traverser = _default_traverser_registry.find_node_traverser
is_traversable_type = _default_traverser_registry.is_traversable_type


def default_registry() -> NodeTraverserRegistry:
  """Returns the registry used by serializers unless configured otherwise."""
  return _default_traverser_registry


def _sequence_path_elements(value: Iterable[Any]) -> Tuple[Index, ...]:
  return tuple(Index(i) for i, _ in enumerate(value))


register_node_traverser(
    dict,
    kind=NodeKind.MAPPING,
    flatten_fn=lambda x: tuple(x.values()),
    path_elements_fn=lambda x: tuple(Key(key) for key in x.keys()))

for _sequence_type in (list, tuple, set, frozenset, collections.deque):
  register_node_traverser(
      _sequence_type,
      kind=NodeKind.SEQUENCE,
      flatten_fn=tuple,
      path_elements_fn=_sequence_path_elements)

register_node_traverser(
    NamedTupleType,
    kind=NodeKind.OBJECT,
    flatten_fn=tuple,
    path_elements_fn=_namedtuple_path_elements)

register_node_traverser(
    DataclassType,
    kind=NodeKind.OBJECT,
    flatten_fn=_flatten_object,
    path_elements_fn=_object_path_elements)

register_node_traverser(
    ObjectType,
    kind=NodeKind.OBJECT,
    flatten_fn=_flatten_object,
    path_elements_fn=_object_path_elements)

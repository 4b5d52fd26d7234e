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

"""Converts object graphs to JSON text, honoring exclusion strategies.

Example:

  serializer = new_serializer(excluded_classes={'my.pkg.Foo2'})
  serializer.to_json(ContainerFoo())  # '{"foo1": {"field1": "field1Value"}}'

Objects (dataclasses, named tuples, and plain objects with attributes) become
JSON objects keyed by field name, mappings become JSON objects, and lists,
tuples and sets become arrays. An excluded value is dropped from objects and
mappings and rendered as `null` inside arrays, so array positions are kept.

Mapping keys are rendered as strings, so distinct keys such as `1` and `'1'`
can end up as the same JSON key. Only the last such entry is kept, and a
warning is logged.
"""

import dataclasses
import enum
import json
from typing import Any, IO, Iterable, Mapping, Optional, Set, Tuple

from absl import logging
from jsonskip._src import exclusion
from jsonskip._src import fields
import typing_extensions


class _Omitted:
  """Marks a converted value that must not appear in the output."""

  def __repr__(self):
    return '<omitted>'


_OMITTED = _Omitted()


def _json_key(key: Any) -> str:
  """Renders a mapping key as a JSON object key."""
  if isinstance(key, str):
    return key
  if isinstance(key, enum.Enum):
    return key.name
  if isinstance(key, (bool, int, float, type(None))):
    return json.dumps(key)
  return str(key)


@dataclasses.dataclass(frozen=True)
class Serializer:
  """A configured, reusable object-to-JSON converter.

  Instances hold no state that changes between calls, so one serializer can
  be shared freely, including across threads.

  Attributes:
    exclusion_strategies: Strategies consulted for every field and value; a
      field or value is omitted if any strategy says so.
    serialize_nulls: Whether `None` field and mapping values are written as
      `null`. Otherwise they are omitted. `None` inside arrays is always kept.
    indent: Indentation for pretty printing, or `None` for a single line.
    registry: Traversers that describe how to take values apart.
  """
  exclusion_strategies: Tuple[exclusion.ExclusionStrategy, ...] = ()
  serialize_nulls: bool = False
  indent: Optional[int] = None
  registry: fields.NodeTraverserRegistry = dataclasses.field(
      default_factory=fields.default_registry, repr=False, compare=False)

  def _should_skip_type(self, cls) -> bool:
    return any(s.should_skip_type(cls) for s in self.exclusion_strategies)

  def _should_skip_field(self, field: exclusion.FieldAttributes) -> bool:
    return any(s.should_skip_field(field) for s in self.exclusion_strategies)

  def _convert(self, value: Any, path: fields.Path, active: Set[int]) -> Any:
    """Converts `value` to JSON-compatible values, or returns `_OMITTED`."""
    value_type = type(value)
    if self._should_skip_type(value_type):
      logging.vlog(1, 'Omitting %s: type %s is excluded.',
                   fields.path_str(path), exclusion.type_name(value_type))
      return _OMITTED
    if isinstance(value, enum.Enum):
      return value.name
    traverser = self.registry.find_node_traverser(value_type)
    if traverser is None:
      # Leaves, and values the json module itself accepts or rejects.
      return value

    if id(value) in active:
      raise ValueError('Circular reference detected')
    active.add(id(value))
    try:
      children = traverser.flatten(value)
      elements = traverser.path_elements(value)
      if traverser.kind == fields.NodeKind.SEQUENCE:
        result = []
        for child, element in zip(children, elements):
          converted = self._convert(child, path + (element,), active)
          result.append(None if converted is _OMITTED else converted)
        return result

      result = {}
      for child, element in zip(children, elements):
        child_path = path + (element,)
        if traverser.kind == fields.NodeKind.OBJECT:
          field = exclusion.FieldAttributes(
              name=element.name,
              declaring_class=element.declaring_class,
              value_type=type(child),
          )
          if self._should_skip_field(field):
            logging.vlog(1, 'Omitting %s: field %r of %s is excluded.',
                         fields.path_str(child_path), field.name,
                         field.declaring_class_name)
            continue
          key = element.name
        else:
          key = _json_key(element.key)
        if child is None and not self.serialize_nulls:
          continue
        converted = self._convert(child, child_path, active)
        if converted is _OMITTED:
          continue
        if key in result:
          logging.warning(
              'Key %r of %s is written more than once; only the last value '
              'is kept.', key, fields.path_str(path))
        result[key] = converted
      return result
    finally:
      active.discard(id(value))

  def to_json_tree(self, value: Any) -> Any:
    """Converts `value` to plain dicts, lists, strings, numbers and `None`.

    Args:
      value: The root of the object graph to convert.

    Returns:
      A value built only from types the `json` module encodes natively,
      except for leaves it cannot encode, which are passed through as is.
      An excluded root converts to `None`.

    Raises:
      ValueError: If the object graph contains a reference cycle.
    """
    converted = self._convert(value, (), set())
    return None if converted is _OMITTED else converted

  def to_json(self, value: Any) -> str:
    """Returns the JSON text for `value`.

    Args:
      value: The root of the object graph to convert.

    Raises:
      TypeError: If a leaf of the graph is not JSON serializable.
      ValueError: If the object graph contains a reference cycle.
    """
    return json.dumps(self.to_json_tree(value), indent=self.indent)

  def write_json(self, value: Any, fp: IO[str]) -> None:
    """Writes the JSON text for `value` to the file-like object `fp`."""
    json.dump(self.to_json_tree(value), fp, indent=self.indent)


class SerializerBuilder:
  """Collects options for a `Serializer`.

  Every setter returns the builder, so calls can be chained:

    serializer = (
        SerializerBuilder()
        .add_exclusion_strategy(policy)
        .set_pretty_printing()
        .create())
  """

  def __init__(self):
    self._exclusion_strategies = []
    self._serialize_nulls = False
    self._indent = None
    self._registry = fields.default_registry()

  def set_exclusion_strategies(
      self, *strategies: exclusion.ExclusionStrategy
  ) -> typing_extensions.Self:
    """Replaces the configured exclusion strategies with `strategies`."""
    for strategy in strategies:
      if not isinstance(strategy, exclusion.ExclusionStrategy):
        raise TypeError(
            f'Expected an ExclusionStrategy, got {strategy!r}.')
    self._exclusion_strategies = list(strategies)
    return self

  def add_exclusion_strategy(
      self, strategy: exclusion.ExclusionStrategy
  ) -> typing_extensions.Self:
    return self.set_exclusion_strategies(*self._exclusion_strategies, strategy)

  def serialize_nulls(self) -> typing_extensions.Self:
    """Writes `None` field and mapping values as `null` instead of omitting."""
    self._serialize_nulls = True
    return self

  def set_pretty_printing(self, indent: int = 2) -> typing_extensions.Self:
    if indent < 0:
      raise ValueError(f'`indent` must be non-negative, got {indent}.')
    self._indent = indent
    return self

  def set_node_traverser_registry(
      self, registry: fields.NodeTraverserRegistry
  ) -> typing_extensions.Self:
    self._registry = registry
    return self

  def create(self) -> Serializer:
    """Returns a new `Serializer` with the options set so far."""
    serializer = Serializer(
        exclusion_strategies=tuple(self._exclusion_strategies),
        serialize_nulls=self._serialize_nulls,
        indent=self._indent,
        registry=self._registry,
    )
    logging.debug('Created %r', serializer)
    return serializer


def new_serializer(
    excluded_classes: Iterable[exclusion.TypeRef] = (),
    excluded_fields: Optional[Mapping[exclusion.TypeRef, str]] = None,
    *,
    serialize_nulls: bool = False,
    indent: Optional[int] = None,
) -> Serializer:
  """Returns a serializer that omits the given classes and fields.

  Any combination of the two exclusion inputs may be given: classes only,
  fields only, both, or neither (which yields the default serializer). Every
  call builds its own `ExclusionPolicy`; serializers never share state.

  Example:

    # Drops every `Foo2` value, wherever it is nested.
    new_serializer(excluded_classes={'my.pkg.Foo2'})
    # Drops `field1` from `Foo1` objects only.
    new_serializer(excluded_fields={'my.pkg.Foo1': 'field1'})

  Identifiers that match no type or field are accepted and have no effect.

  Args:
    excluded_classes: Types, or their fully-qualified identifiers (see
      `type_name`), whose values are omitted everywhere.
    excluded_fields: Maps a type, or its fully-qualified identifier, to the
      name of one field declared by that type which is omitted.
    serialize_nulls: Write `None` field values as `null` instead of omitting
      them.
    indent: If set, pretty-print with this indentation.

  Returns:
    A new `Serializer`.
  """
  policy = exclusion.ExclusionPolicy.create(excluded_classes, excluded_fields)
  builder = SerializerBuilder().set_exclusion_strategies(policy)
  if serialize_nulls:
    builder.serialize_nulls()
  if indent is not None:
    builder.set_pretty_printing(indent)
  return builder.create()

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

"""Exclusion strategies consulted while converting object graphs to JSON.

An `ExclusionStrategy` answers two questions for the serializer: should a
given field be left out, and should every value of a given type be left out.
`ExclusionPolicy` is the stock strategy, driven by a set of excluded type
identifiers and a mapping from type identifier to one excluded field name.
"""

import abc
import dataclasses
import types
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Type, Union

from absl import logging

# Either a fully-qualified type identifier or the type itself.
TypeRef = Union[str, Type[Any]]


def type_name(cls: Type[Any]) -> str:
  """Returns the fully-qualified identifier of `cls`, e.g. `pkg.mod.Foo`."""
  return f'{cls.__module__}.{cls.__qualname__}'


def _as_type_name(ref: TypeRef) -> str:
  if isinstance(ref, str):
    return ref
  if isinstance(ref, type):
    return type_name(ref)
  raise TypeError(
      f'Expected a type or a type identifier string, got {ref!r}.')


@dataclasses.dataclass(frozen=True)
class FieldAttributes:
  """A field encountered while traversing an object.

  Attributes:
    name: The field (attribute) name.
    declaring_class: The class that declares the field. For dataclass and
      annotated fields this is the class whose body declares it, which may be
      a base class of the object being converted.
    value_type: The runtime type of the field's current value.
  """
  name: str
  declaring_class: Type[Any]
  value_type: Type[Any]

  @property
  def declaring_class_name(self) -> str:
    return type_name(self.declaring_class)

  @property
  def value_type_name(self) -> str:
    return type_name(self.value_type)


class ExclusionStrategy(metaclass=abc.ABCMeta):
  """Decides which fields and types a serializer leaves out."""

  @abc.abstractmethod
  def should_skip_field(self, field: FieldAttributes) -> bool:
    """Returns whether `field` should be omitted from its object."""
    raise NotImplementedError()

  @abc.abstractmethod
  def should_skip_type(self, cls: Type[Any]) -> bool:
    """Returns whether every value whose runtime type is `cls` is omitted."""
    raise NotImplementedError()


@dataclasses.dataclass(frozen=True)
class ExclusionPolicy(ExclusionStrategy):
  """Excludes listed types entirely, and one listed field per type.

  Both decisions are pure functions of their arguments. Identifiers that never
  match a real type or field are accepted and simply never trigger.

  Only one field can be excluded per type, since `excluded_fields` maps each
  type identifier to a single field name.

  Attributes:
    excluded_classes: Fully-qualified identifiers of types whose values are
      omitted wherever they appear.
    excluded_fields: Maps a fully-qualified identifier of a declaring type to
      the name of the field to omit from it.
  """
  excluded_classes: FrozenSet[str] = frozenset()
  excluded_fields: Mapping[str, str] = dataclasses.field(
      default_factory=lambda: types.MappingProxyType({}), hash=False)

  def __post_init__(self):
    # Snapshot the inputs, so the policy never changes after construction.
    object.__setattr__(self, 'excluded_classes',
                       frozenset(self.excluded_classes))
    object.__setattr__(self, 'excluded_fields',
                       types.MappingProxyType(dict(self.excluded_fields)))

  @classmethod
  def create(
      cls,
      excluded_classes: Iterable[TypeRef] = (),
      excluded_fields: Optional[Mapping[TypeRef, str]] = None,
  ) -> 'ExclusionPolicy':
    """Builds a policy from caller-owned collections.

    The inputs are copied, so mutating them afterwards has no effect on the
    returned policy.

    Args:
      excluded_classes: Types, or their fully-qualified identifiers, to omit.
      excluded_fields: Maps a type (or its identifier) to one field name to
        omit from that type.

    Returns:
      A new `ExclusionPolicy`.
    """
    classes = frozenset(_as_type_name(ref) for ref in excluded_classes)
    fields = {
        _as_type_name(ref): name
        for ref, name in (excluded_fields or {}).items()
    }
    logging.debug('Created exclusion policy: classes=%s, fields=%s',
                  sorted(classes), fields)
    return cls(
        excluded_classes=classes,
        excluded_fields=types.MappingProxyType(fields),
    )

  def should_skip_field(self, field: FieldAttributes) -> bool:
    excluded_name = self.excluded_fields.get(field.declaring_class_name)
    return excluded_name is not None and excluded_name == field.name

  def should_skip_type(self, cls: Type[Any]) -> bool:
    return type_name(cls) in self.excluded_classes

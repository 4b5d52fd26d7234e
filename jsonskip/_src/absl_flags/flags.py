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

"""Command line flags for configuring which classes and fields to exclude.

Example:

  from absl import app
  from jsonskip import absl_flags as jsonskip_flags

  _EXCLUDED_CLASSES = jsonskip_flags.DEFINE_excluded_classes(
      'exclude_class', [], 'Types whose values are left out of the output.')
  _EXCLUDED_FIELDS = jsonskip_flags.DEFINE_excluded_fields(
      'exclude_field', [], 'Fields left out of the output, as Type:field.')

  def main(argv):
    serializer = jsonskip_flags.new_serializer_from_flags(
        _EXCLUDED_CLASSES, _EXCLUDED_FIELDS)
    print(serializer.to_json(load_report()))

  if __name__ == '__main__':
    app.run(main)

Invoked as:

  report --exclude_class=my.pkg.Secret --exclude_field=my.pkg.User:password
"""

from typing import Any, Iterable, List, Optional, Tuple

from absl import flags
from absl import logging
from jsonskip._src import serializer as serializer_lib

ExcludedField = Tuple[str, str]


class ExcludedFieldParser(flags.ArgumentParser):
  """Parses `pkg.module.Type:field` into a `(type identifier, field)` pair."""

  def parse(self, argument: Any) -> ExcludedField:
    if isinstance(argument, tuple):
      type_id, field_name = argument
    else:
      type_id, sep, field_name = str(argument).rpartition(':')
      if not sep:
        raise ValueError(
            f'Expected TYPE:FIELD (e.g. my.pkg.Foo:bar), got {argument!r}.')
    type_id, field_name = type_id.strip(), field_name.strip()
    if not type_id or not field_name:
      raise ValueError(
          f'Both a type identifier and a field name are required, got '
          f'{argument!r}.')
    if not field_name.isidentifier():
      raise ValueError(f'{field_name!r} is not a valid field name.')
    return type_id, field_name

  def flag_type(self) -> str:
    return 'excluded field'


class ExcludedFieldSerializer(flags.ArgumentSerializer):

  def serialize(self, value: ExcludedField) -> str:
    return ':'.join(value)


def DEFINE_excluded_classes(  # pylint: disable=invalid-name
    name: str,
    default: Optional[Iterable[str]],
    help_string: str,
    flag_values: flags.FlagValues = flags.FLAGS,
    **kwargs,
) -> flags.FlagHolder:
  """Defines a repeatable flag naming fully-qualified types to exclude."""
  return flags.DEFINE_multi_string(
      name, default, help_string, flag_values=flag_values, **kwargs)


def DEFINE_excluded_fields(  # pylint: disable=invalid-name
    name: str,
    default: Optional[Iterable[str]],
    help_string: str,
    flag_values: flags.FlagValues = flags.FLAGS,
    **kwargs,
) -> flags.FlagHolder:
  """Defines a repeatable flag of `Type:field` pairs to exclude."""
  return flags.DEFINE_multi(
      ExcludedFieldParser(),
      ExcludedFieldSerializer(),
      name,
      default,
      help_string,
      flag_values=flag_values,
      **kwargs,
  )


def _flag_value(holder: Optional[flags.FlagHolder]) -> List[Any]:
  if holder is None or holder.value is None:
    return []
  return list(holder.value)


def new_serializer_from_flags(
    classes_flag: Optional[flags.FlagHolder] = None,
    fields_flag: Optional[flags.FlagHolder] = None,
    **kwargs,
) -> serializer_lib.Serializer:
  """Returns a serializer configured from parsed exclusion flags.

  Args:
    classes_flag: A flag defined with `DEFINE_excluded_classes`.
    fields_flag: A flag defined with `DEFINE_excluded_fields`. Only one field
      can be excluded per type; if a type is given several times, the last
      occurrence wins.
    **kwargs: Additional options forwarded to `jsonskip.new_serializer`.
  """
  excluded_classes = _flag_value(classes_flag)
  excluded_fields = {}
  for type_id, field_name in _flag_value(fields_flag):
    if type_id in excluded_fields and excluded_fields[type_id] != field_name:
      logging.warning(
          'Only one field can be excluded per type; %r replaces %r for %s.',
          field_name, excluded_fields[type_id], type_id)
    excluded_fields[type_id] = field_name
  return serializer_lib.new_serializer(
      excluded_classes, excluded_fields, **kwargs)

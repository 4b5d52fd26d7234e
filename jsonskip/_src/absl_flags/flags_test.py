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

"""Tests for the exclusion flags."""

from absl import flags
from absl.testing import absltest
from absl.testing import parameterized
from jsonskip._src.absl_flags import flags as jsonskip_flags
from jsonskip._src.testing import example_types

_MODULE = 'jsonskip._src.testing.example_types'


class ExcludedFieldParserTest(parameterized.TestCase):

  @parameterized.parameters(
      ('pkg.mod.Foo:bar', ('pkg.mod.Foo', 'bar')),
      (' pkg.mod.Foo : bar ', ('pkg.mod.Foo', 'bar')),
      (('pkg.mod.Foo', 'bar'), ('pkg.mod.Foo', 'bar')),
  )
  def test_parse(self, argument, expected):
    parser = jsonskip_flags.ExcludedFieldParser()
    self.assertEqual(parser.parse(argument), expected)

  @parameterized.parameters('pkg.mod.Foo', 'pkg.mod.Foo:', ':bar',
                            'pkg.mod.Foo:not-a-name')
  def test_parse_errors(self, argument):
    with self.assertRaises(ValueError):
      jsonskip_flags.ExcludedFieldParser().parse(argument)

  def test_serialize(self):
    serializer = jsonskip_flags.ExcludedFieldSerializer()
    self.assertEqual(serializer.serialize(('pkg.mod.Foo', 'bar')),
                     'pkg.mod.Foo:bar')


class NewSerializerFromFlagsTest(absltest.TestCase):

  def setUp(self):
    super().setUp()
    self.flag_values = flags.FlagValues()
    self.classes_flag = jsonskip_flags.DEFINE_excluded_classes(
        'exclude_class', [], 'Excluded types.', flag_values=self.flag_values)
    self.fields_flag = jsonskip_flags.DEFINE_excluded_fields(
        'exclude_field', [], 'Excluded fields.', flag_values=self.flag_values)

  def test_classes_and_fields(self):
    self.flag_values([
        'program',
        f'--exclude_class={_MODULE}.Foo2',
        f'--exclude_field={_MODULE}.Foo1:field1',
    ])
    serializer = jsonskip_flags.new_serializer_from_flags(
        self.classes_flag, self.fields_flag)
    self.assertEqual(
        serializer.to_json(example_types.ContainerFoo()), '{"foo1": {}}')

  def test_last_field_for_a_type_wins(self):
    self.flag_values([
        'program',
        f'--exclude_field={_MODULE}.DoubleFoo:field1',
        f'--exclude_field={_MODULE}.DoubleFoo:field2',
    ])
    serializer = jsonskip_flags.new_serializer_from_flags(
        fields_flag=self.fields_flag)
    self.assertEqual(
        serializer.to_json(example_types.DoubleFoo()),
        '{"field1": "field1Value"}')

  def test_defaults(self):
    self.flag_values(['program'])
    serializer = jsonskip_flags.new_serializer_from_flags(
        self.classes_flag, self.fields_flag, indent=2)
    self.assertEqual(serializer.indent, 2)
    self.assertEqual(
        serializer.to_json_tree(example_types.DoubleFoo()),
        {'field1': 'field1Value', 'field2': 'field2Value'})

  def test_no_flags(self):
    serializer = jsonskip_flags.new_serializer_from_flags()
    self.assertEqual(serializer.to_json(example_types.Foo1()),
                     '{"field1": "field1Value"}')

  def test_malformed_field_flag(self):
    with self.assertRaises(flags.IllegalFlagValueError):
      self.flag_values(['program', '--exclude_field=no_separator'])


if __name__ == '__main__':
  absltest.main()

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

"""Command line flags for configuring `jsonskip` serializers.

See `jsonskip._src.absl_flags.flags` for a usage example.
"""

# pylint: disable=unused-import
from jsonskip._src.absl_flags.flags import DEFINE_excluded_classes
from jsonskip._src.absl_flags.flags import DEFINE_excluded_fields
from jsonskip._src.absl_flags.flags import ExcludedFieldParser
from jsonskip._src.absl_flags.flags import ExcludedFieldSerializer
from jsonskip._src.absl_flags.flags import new_serializer_from_flags

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

"""Setup script for jsonskip.

jsonskip converts Python object graphs to JSON while leaving out chosen
classes, or chosen fields of chosen classes.
"""

# pyformat: disable

from setuptools import find_packages
from setuptools import setup


_dct = {}
with open('jsonskip/version.py', encoding='utf-8') as f:
  exec(f.read(), _dct)  # pylint: disable=exec-used
__version__ = _dct['__version__']

long_description = """
# jsonskip

jsonskip builds JSON serializers that omit whole classes, or one field of a
class, wherever they appear in the object graph being converted:

    import jsonskip

    serializer = jsonskip.new_serializer(
        excluded_classes={'my.pkg.Secret'},
        excluded_fields={'my.pkg.User': 'password'},
    )
    serializer.to_json(report)
"""

setup(
    name='jsonskip',
    version=__version__,
    include_package_data=True,
    packages=find_packages(exclude=['docs']),  # Required
    python_requires='>=3.10',
    install_requires=[
        'absl-py',
        'typing-extensions',
    ],
    extras_require={
        'testing': [
            'pytest',
        ],
    },
    description='jsonskip: JSON serialization with class and field exclusions',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='The jsonskip Authors',
    classifiers=[
        'Development Status :: 3 - Alpha',

        # Indicate who your project is intended for
        'Intended Audience :: Developers',

        # Pick your license as you wish
        'License :: OSI Approved :: Apache Software License',

        # Specify the Python versions you support here.
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',

        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    license='Apache 2.0',
    keywords='json serialization exclusion python'
)

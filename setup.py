#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re

from setuptools import find_packages, setup

# XXX: the version is read as text, importing fixed256 here would need its dependencies at build time
with open('fixed256/version.py') as fp:
    version_match = re.search(r"^__version__ = '([^']+)'", fp.read(), re.MULTILINE)
    assert version_match is not None
    __version__ = version_match.group(1)

setup(
    name='fixed256',
    version=__version__,
    description='Fixed-width 256-bit integer types with overflow checks and base-10 text serialization',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.10',
    install_requires=[
        'colorama',
        'configargparse',
        'pydantic>=2',
        'structlog',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['fixed256-cli=fixed256.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('fixed256_tests', 'fixed256_tests.*')),
)

#!/usr/bin/env python3
"""
Multi-step rotation animations for kivy widgets
"""
# SPDX-License-Identifier: GPL-3.0
import sys
if sys.version_info < (3,6):
    raise Exception("Python 3.6 required -- this is only " + sys.version)

import re
import setuptools
import unittest

__version__ = re.search(r'(?m)^__version__\s*=\s*"([\d.]+(?:[\-\+~.]\w+)*)"', open('kvrotate/__init__.py').read()).group(1)

def my_test_suite():
    return unittest.TestLoader().discover('tests', pattern='test_*.py')

setuptools.setup(
    name         = 'kvrotate',
    version      = __version__,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Software Development',
        ],
    description  = 'Multi-step rotation animations for kivy widgets',
    packages     = setuptools.find_packages(exclude=['tests', 'examples']),
    install_requires = [
        'amethyst-core (>=0.8.6)',
        'kivy (>=2.0)',
    ],
    python_requires = '>=3.6',
    test_suite   = 'setup.my_test_suite',
)

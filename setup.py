#!/usr/bin/env python3
"""
Setup script for yamlpeek.

yamlpeek is pure Python. Parsing is done by PyYAML's pure-Python loader
(comments are captured by a scanner subclass, so the C loader cannot be
used); comment-preserving output uses ruamel.yaml.

Environment variables:
- YAMLPEEK_LOG_LEVEL : Log level for the command line tool (default WARNING)
"""

import os
import re

from setuptools import setup


def read_version():
    """Read __version__ from the package without importing it."""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'yamlpeek', '__init__.py')
    with open(path, encoding='utf-8') as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in %s" % path)
    return match.group(1)


setup(
    name='yamlpeek',
    version=read_version(),
    description='Inspect YAML streams as events, tokens, node trees, YAML and JSON',
    python_requires='>=3.8',
    packages=['yamlpeek'],
    install_requires=[
        'PyYAML>=6.0',
        'ruamel.yaml>=0.17.21',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    entry_points={
        'console_scripts': ['yamlpeek = yamlpeek.cli:main'],
    },
)

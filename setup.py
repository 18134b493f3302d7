# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Varigrad build configuration.

Pure-Python package; NumPy is the only runtime dependency.

Build
-----
    pip install -e .                          # editable install
    pip install -e .[dev]                     # plus pytest / pytest-benchmark
    python setup.py bdist_wheel               # wheel
"""
import os

from setuptools import setup, find_packages

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='varigrad',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'A minimal reverse-mode automatic differentiation engine '
        'on top of NumPy'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/pictofeed/varigrad',
    license='Proprietary',

    packages=find_packages(include=['varigrad', 'varigrad.*']),

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-benchmark',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    zip_safe=False,
)

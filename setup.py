"""Build configuration for Gdenticon.

Usage:
    pip install -e .            # library + `gdenticon` command
    pip install -e .[test]      # plus the test dependencies

Produces: the `gdenticon` console script and the flat modules below.
"""
from setuptools import setup

MODULES = ['gdenticon', 'generator', 'graphics', 'models', 'renderer', 'shapes', 'theme']

setup(
    name='gdenticon',
    version='1.0.0',
    description='Deterministic SVG identicons from hex hashes',
    py_modules=MODULES,
    python_requires='>=3.10',
    install_requires=['numpy>=2'],
    extras_require={
        'test': ['pytest', 'Pillow'],
    },
    entry_points={
        'console_scripts': ['gdenticon=gdenticon:main'],
    },
)

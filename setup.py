from setuptools import setup

long_description = """
Measurand is a Python library for physical quantities. A quantity couples a
numerical value to its physical dimensions, its preferred units of display and
a relative standard uncertainty. Arithmetic is checked for dimensional
consistency, results are re-typed to the quantity type that matches their
dimensions, and uncertainties are propagated following the NIST rules for
combining uncertainty components.

Values are drawn from a numeric tower of exact integers, IEEE doubles,
arbitrary precision decimals, imaginary and complex numbers, so that the same
quantity math runs in double or in arbitrary precision.
"""

import os, re
with open(os.path.join('measurand', '__init__.py')) as f:
  version = next(filter(None, map(re.compile("^__version__ = version = '([a-zA-Z0-9.]+)'$").match, f))).group(1)

setup(
  name = 'measurand',
  version = version,
  description = 'Physical quantities with dimensional analysis, units and uncertainty',
  packages = ['measurand'],
  long_description = long_description,
  license = 'MIT',
  python_requires = '>=3.8',
  install_requires = ['numpy>=1.17', 'treelog>=1.0b5', 'stringly'],
)

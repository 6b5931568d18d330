'''
Extensions of the :mod:`unittest` module.
'''

import unittest
import sys
import types as builtin_types
import logging
import warnings as _builtin_warnings
import treelog
from measurand import warnings, quantity


class PrintHandler(logging.Handler):
    'similar to StreamHandler except using always the current sys.stdout'

    def emit(self, record):
        print(record.msg)


class _ParametrizedCollection(type):

    def __new__(mcls, name, bases, namespace, base):
        return super().__new__(mcls, name, bases, namespace)

    def __init__(cls, name, bases, namespace, base):
        super().__init__(name, bases, namespace)
        cls.__base = base
        for attr in '__module__', '__qualname__', '__doc__':
            if hasattr(base, attr):
                setattr(cls, attr, getattr(base, attr))

    def __call__(cls, name, **params):
        if '.' in name or hasattr(cls, name):
            raise ValueError(f'invalid or duplicate test name {name!r}')

        def setUp(self):
            for k, v in params.items():
                setattr(self, k, v)
            return cls.__base.setUp(self)

        qualname = cls.__qualname__ + ':' + name
        TestCase = builtin_types.new_class(name, (cls.__base,), exec_body=lambda ns: ns.update(setUp=setUp,
            __qualname__=qualname, __module__=cls.__module__, __doc__=cls.__doc__))
        setattr(cls, name, TestCase)
        # Make the case discoverable by `unittest.TestLoader.loadTestsFromModule`.
        setattr(sys.modules[cls.__module__], qualname, TestCase)


def parametrize(TestCase):
    '''Parametrize a :class:`unittest.TestCase`.

    Every call of the returned collection with a name and keyword arguments
    adds a test case, in which the keyword arguments are available as
    attributes:

    >>> @parametrize
    ... class TestSomething(unittest.TestCase):
    ...   def test_equality(self):
    ...     self.assertEqual(self.x, self.y)
    >>> TestSomething('one', x=1, y=1)
    >>> TestSomething('two', x=2, y=2)
    '''

    return builtin_types.new_class(TestCase.__name__, (), dict(metaclass=_ParametrizedCollection, base=TestCase))


class TestCase(unittest.TestCase):
    '''A class whose instances are single test cases.

    All :class:`measurand.warnings.MeasurandWarning` are turned into an
    exception by default. Use

    ::

      def test(self):
        with self.assertWarns(...):
          ...

    to assert expected warnings.
    '''

    maxDiff = None  # prevent assertEqual from shortening the diff error message

    def enter_context(self, ctx):
        retval = ctx.__enter__()
        self.addCleanup(ctx.__exit__, None, None, None)
        return retval

    def setUp(self):
        super().setUp()
        print_handler = PrintHandler()
        measurand_logger = logging.getLogger('measurand')
        measurand_logger.setLevel('INFO')  # handle events of level INFO and up
        measurand_logger.addHandler(print_handler)
        self.addCleanup(measurand_logger.removeHandler, print_handler)
        self.enter_context(treelog.set(treelog.LoggingLog('measurand')))
        self.enter_context(_builtin_warnings.catch_warnings())
        _builtin_warnings.simplefilter('error', warnings.MeasurandWarning)

    def assertQuantityAlmostEqual(self, actual, desired, **kwargs):
        '''Assert that two quantities have equal dimensions and almost equal
        values. A number as ``desired`` is compared to the MKS value of
        ``actual``.'''

        self.assertIsInstance(actual, quantity.Quantity)
        if isinstance(desired, quantity.Quantity):
            self.assertEqual(actual.dimensions, desired.dimensions)
            desired = desired.value_si
        self.assertAlmostEqual(float(actual.value_si), float(desired), **kwargs)


# vim:sw=4:sts=4:et

'''
The quantity module defines :class:`Quantity`, the value type that ties a
number to its physical dimensions, preferred units and relative standard
uncertainty.

Quantity itself is abstract. Concrete types are declared by subclassing with
the dimensions they represent, which registers them so that arithmetic
results are re-typed by their dimensions:

    >>> from measurand.quantity import Quantity
    >>> from measurand.dimensions import Dimensions
    >>> class Hypervolume(Quantity, dimensions=Dimensions(Length=4), register=False):
    ...     pass
    >>> Hypervolume(3) + Hypervolume(4)
    MiscQuantity(Integer(7), Dimensions(Length=4))

Here the sum is a :class:`MiscQuantity` because ``Hypervolume`` opted out of
the registry; had it registered, the sum would be a ``Hypervolume`` as well.

Values are stored in MKS units. Arithmetic checks dimensions and propagates
uncertainty following the NIST rules for combining uncertainty components:
for sums and differences the standard uncertainties add in quadrature, for
products and quotients the relative uncertainties do, and a power scales the
relative uncertainty by the absolute value of the exponent.
'''

import io
import math
import numbers
import operator
import numpy
import treelog as log
from functools import partial, partialmethod
from . import number, config
from .dimensions import Dimensions, DimensionsMismatch, registry
from .format import NumberFormatSI, UncertaintyFormat
from .units import Units


class InvalidOperandType(TypeError):
    pass


def _isnumeric(value):
    return isinstance(value, (number.Number, numbers.Number))


def _scalar(value):
    return Dimensions().to_quantity(value)


def combined_uncertainty_sum_diff(q1, q2, value):
    '''Relative combined standard uncertainty of the sum or difference ``value`` of ``q1`` and ``q2``.'''

    if not q1.relative_uncertainty and not q2.relative_uncertainty:
        return 0.
    u1 = q1.relative_uncertainty * float(abs(q1.value_si))
    u2 = q2.relative_uncertainty * float(abs(q2.value_si))
    with numpy.errstate(divide='ignore', invalid='ignore'):
        return float(numpy.true_divide(math.hypot(u1, u2), float(abs(value))))


def _reverse(self, func, arg):
    return func(arg, self)


class Quantity:
    '''Abstract base class of all quantities.

    Args
    ----
    value : :class:`measurand.number.Number` or Python number
        Value in ``units``, or in MKS units if ``units`` is omitted.
    units : :class:`measurand.units.Units`, optional
        Units of ``value``, which must measure this type's dimensions. They
        become the preferred units for display; if omitted the type's
        ``si_units`` are used.
    uncert : :class:`float`
        Relative standard uncertainty, the standard deviation of the implied
        normal distribution divided by the magnitude of the value.

    Attributes
    ----------
    value_si : :class:`measurand.number.Number`
        The value in MKS units.
    dimensions : :class:`measurand.dimensions.Dimensions`
    preferred_units : :class:`measurand.units.Units` or ``None``
    relative_uncertainty : :class:`float`
    '''

    dimensions = None
    si_units = None

    def __init_subclass__(cls, dimensions=None, si_units=None, register=True, **kwargs):
        super().__init_subclass__(**kwargs)
        if dimensions is not None:
            cls.dimensions = dimensions
            if register:
                registry.register(dimensions, cls)
        if si_units is not None:
            if si_units.dimensions != cls.dimensions:
                raise DimensionsMismatch(f'units {si_units.name} do not measure [{cls.dimensions}]')
            cls.si_units = si_units

    def __init__(self, value=0, units=None, uncert=0.):
        if type(self).dimensions is None:
            raise TypeError(f'{type(self).__name__} cannot be instantiated without dimensions')
        if units is None:
            self._setstate(number.asnumber(value), self.dimensions, self.si_units, uncert)
        else:
            if units.dimensions != self.dimensions:
                raise DimensionsMismatch(f'expected units of [{self.dimensions}], got {units.name} of [{units.dimensions}]')
            self._setstate(units.to_mks(value), self.dimensions, units, uncert)

    def _setstate(self, value_si, dimensions, preferred_units, uncert):
        uncert = float(uncert)
        if uncert < 0:
            raise ValueError(f'relative uncertainty must be non-negative, got {uncert}')
        self.__dict__.update(value_si=value_si, dimensions=dimensions, preferred_units=preferred_units, relative_uncertainty=uncert)

    def __setattr__(self, name, value):
        raise AttributeError('readonly attribute: {}'.format(name))

    def __delattr__(self, name):
        raise AttributeError('readonly attribute: {}'.format(name))

    @classmethod
    def wrap(cls, value_si, units=None, uncert=0.):
        '''Create a quantity from a value in MKS units.

        Unlike the constructor, ``units`` only sets the preferred units and
        does not affect the value. See :func:`Quantity.unwrap` for the reverse
        operation.'''

        if cls.dimensions is None:
            raise TypeError(f'{cls.__name__} cannot be instantiated without dimensions')
        if units is not None and units.dimensions != cls.dimensions:
            raise DimensionsMismatch(f'expected units of [{cls.dimensions}], got {units.name} of [{units.dimensions}]')
        self = object.__new__(cls)
        self._setstate(number.asnumber(value_si), cls.dimensions, units if units is not None else cls.si_units, uncert)
        return self

    def unwrap(self):
        '''The value in MKS units. For any quantity ``q`` of a registered type
        it holds that ``q == type(q).wrap(q.unwrap())``.'''

        return self.value_si

    def _replace(self, value_si):
        q = object.__new__(type(self))
        q._setstate(value_si, self.dimensions, self.preferred_units, self.relative_uncertainty)
        return q

    @property
    def mks(self):
        return self.value_si

    @property
    def cgs(self):
        'The value in centimeter-gram-second units.'

        value = self.value_si
        value *= number.Integer(100) ** self.dimensions.component_exponent('Length')
        value *= number.Integer(1000) ** self.dimensions.component_exponent('Mass')
        return value

    @property
    def isscalar(self):
        return self.dimensions.isscalar

    @property
    def isscalarsi(self):
        return self.dimensions.isscalarsi

    @property
    def arbitrary_precision(self):
        return isinstance(self.value_si, number.Precise)

    def value_in_units(self, units):
        '''The value in ``units``, or in MKS units if ``units`` is None.'''

        if units is None:
            return self.value_si
        if units.dimensions != self.dimensions:
            raise DimensionsMismatch(f'cannot express [{self.dimensions}] in {units.name} of [{units.dimensions}]')
        return units.from_mks(self.value_si)

    ## UNCERTAINTY

    @property
    def standard_uncertainty(self):
        'The standard uncertainty as a quantity of the same dimensions.'

        return self.dimensions.to_quantity(abs(self.value_si) * self.relative_uncertainty)

    def calc_expanded_uncertainty(self, k):
        '''The expanded uncertainty for coverage factor ``k``; ``k=2`` gives
        a confidence level of approximately 95%.'''

        return self.dimensions.to_quantity(abs(self.value_si) * self.relative_uncertainty * k)

    def random_sample(self, rng=None):
        '''Draw a sample from the normal distribution implied by the uncertainty.

        Args
        ----
        rng : :class:`numpy.random.Generator`, optional
            Source of randomness. Defaults to a generator seeded with
            :attr:`measurand.config.random_seed`.

        Returns
        -------
        :class:`Quantity`
            This quantity if it has no uncertainty, or if the inverse of the
            error function does not converge.
        '''

        if not self.relative_uncertainty:
            return self
        if rng is None:
            rng = numpy.random.default_rng(config.random_seed)
        test = 2. * rng.random() - 1.
        x = -4.
        delta = 1.
        for i in range(10000):
            fx = math.erf(x)
            if abs(fx - test) < 1e-4:
                break
            if fx > test:
                x -= delta
                delta *= .5
            else:
                x += delta
        else:
            log.debug(f'inverse error function did not converge for {test}; returning the unperturbed value')
            return self
        return self + self.standard_uncertainty * (x * math.sqrt(2.))

    ## POPULATE DISPATCH TABLE

    @staticmethod
    def __promote(op, *args, additive=False):
        if any(arg is None for arg in args):
            raise InvalidOperandType(f'cannot {op.__name__} None and a quantity')
        quantities = [arg for arg in args if isinstance(arg, Quantity)]
        promoted = []
        for arg in args:
            if isinstance(arg, Quantity):
                promoted.append(arg)
            elif not _isnumeric(arg):
                raise InvalidOperandType(f'cannot {op.__name__} {type(arg).__name__} and a quantity')
            elif additive and not all(q.isscalar for q in quantities):
                raise InvalidOperandType(f'cannot {op.__name__} a number and a quantity of [{quantities[0].dimensions}]')
            else:
                promoted.append(_scalar(arg))
        return promoted

    __DISPATCH_TABLE = {}

    def register(func, op=None, __table=__DISPATCH_TABLE):
        def r(dispatch_func):
            __table[func] = partial(dispatch_func, op or func)
            return dispatch_func
        return r

    @register(numpy.absolute, operator.abs)
    @register(numpy.negative, operator.neg)
    @register(numpy.positive, operator.pos)
    @register(operator.abs)
    @register(operator.neg)
    @register(operator.pos)
    def __unary(op, arg):
        return arg._replace(op(arg.value_si))

    @register(numpy.add, operator.add)
    @register(numpy.subtract, operator.sub)
    @register(operator.add)
    @register(operator.sub)
    def __add_like(op, *args):
        a, b = Quantity.__promote(op, *args, additive=True)
        if a.dimensions != b.dimensions:
            raise DimensionsMismatch(f'incompatible arguments for {op.__name__}: [{a.dimensions}], [{b.dimensions}]')
        value = op(a.value_si, b.value_si)
        return a.dimensions.to_quantity(value, None, combined_uncertainty_sum_diff(a, b, value))

    @register(numpy.multiply, operator.mul)
    @register(operator.mul)
    def __mul_like(op, *args):
        a, b = Quantity.__promote(op, *args)
        ur = math.hypot(a.relative_uncertainty, b.relative_uncertainty)
        return (a.dimensions * b.dimensions).to_quantity(a.value_si * b.value_si, None, ur)

    @register(numpy.divide, operator.truediv)
    @register(operator.truediv)
    def __div_like(op, *args):
        a, b = Quantity.__promote(op, *args)
        return a * b.inverse()

    @register(numpy.reciprocal)
    def __reciprocal(op, arg):
        return arg.inverse()

    @register(numpy.sqrt)
    def __sqrt(op, arg):
        return arg.sqrt()

    @register(numpy.power, operator.pow)
    @register(operator.pow)
    def __pow_like(op, base, exponent):
        base, = Quantity.__promote(op, base)
        if isinstance(exponent, Quantity):
            if not exponent.isscalar:
                raise DimensionsMismatch(f'exponent must be a scalar, got [{exponent.dimensions}]')
            exponent = exponent.value_si
        if exponent is None or not _isnumeric(exponent):
            raise InvalidOperandType(f'cannot raise a quantity to the power {exponent!r}')
        exponent = number.asnumber(exponent)
        if exponent == 1:
            return base
        if exponent == 0:
            return _scalar(number.Double(math.nan) if not base.value_si else number.Integer(1))
        ur = base.relative_uncertainty * abs(float(exponent))
        return (base.dimensions ** exponent).to_quantity(base.value_si ** exponent, None, ur)

    @register(numpy.equal, operator.eq)
    @register(numpy.not_equal, operator.ne)
    @register(numpy.greater, operator.gt)
    @register(numpy.greater_equal, operator.ge)
    @register(numpy.less, operator.lt)
    @register(numpy.less_equal, operator.le)
    @register(operator.gt)
    @register(operator.ge)
    @register(operator.lt)
    @register(operator.le)
    def __compare(op, *args):
        if op in (operator.eq, operator.ne):
            a, b = args
            if not isinstance(a, Quantity):
                a, b = b, a
            return op(a, b)
        # ordering is by value only, regardless of dimensions
        a, b = Quantity.__promote(op, *args)
        return op(a.value_si, b.value_si)

    del register

    ## DEFINE OPERATORS

    __neg__ = partialmethod(__DISPATCH_TABLE[operator.neg])
    __pos__ = partialmethod(__DISPATCH_TABLE[operator.pos])
    __abs__ = partialmethod(__DISPATCH_TABLE[operator.abs])
    __lt__ = partialmethod(__DISPATCH_TABLE[operator.lt])
    __le__ = partialmethod(__DISPATCH_TABLE[operator.le])
    __gt__ = partialmethod(__DISPATCH_TABLE[operator.gt])
    __ge__ = partialmethod(__DISPATCH_TABLE[operator.ge])
    __add__ = partialmethod(__DISPATCH_TABLE[operator.add])
    __radd__ = partialmethod(_reverse, __DISPATCH_TABLE[operator.add])
    __sub__ = partialmethod(__DISPATCH_TABLE[operator.sub])
    __rsub__ = partialmethod(_reverse, __DISPATCH_TABLE[operator.sub])
    __mul__ = partialmethod(__DISPATCH_TABLE[operator.mul])
    __rmul__ = partialmethod(_reverse, __DISPATCH_TABLE[operator.mul])
    __truediv__ = partialmethod(__DISPATCH_TABLE[operator.truediv])
    __rtruediv__ = partialmethod(_reverse, __DISPATCH_TABLE[operator.truediv])
    __pow__ = partialmethod(__DISPATCH_TABLE[operator.pow])
    __rpow__ = partialmethod(_reverse, __DISPATCH_TABLE[operator.pow])

    def abs(self):
        return abs(self)

    def inverse(self):
        '''The reciprocal, with inverted dimensions and unchanged relative uncertainty.'''

        return self.dimensions.invert().to_quantity(self.value_si.reciprocal(), None, self.relative_uncertainty)

    def sqrt(self):
        return self ** .5

    def __eq__(self, other):
        if isinstance(other, Quantity):
            return self.dimensions == other.dimensions and self.value_si == other.value_si
        if self.isscalar and _isnumeric(other):
            return self.value_si == other
        return NotImplemented

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        if self.isscalar:
            return hash(self.value_si)
        return hash((self.value_si, self.dimensions))

    def __bool__(self):
        return bool(self.value_si)

    def compare(self, other):
        '''Compare the MKS values of this and another quantity, returning -1,
        0 or 1. The dimensions of the two quantities are not considered.'''

        if not isinstance(other, Quantity):
            raise InvalidOperandType(f'cannot compare a quantity with {type(other).__name__}')
        return self.value_si.compare(other.value_si)

    ## DISPATCH THIRD PARTY CALLS

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != '__call__' or kwargs:
            return NotImplemented
        f = self.__DISPATCH_TABLE.get(ufunc)
        if f is None:
            return NotImplemented
        return f(*inputs)

    ## OUTPUT

    def output_text(self, buffer, uncert_format=UncertaintyFormat.none, symbols=True, number_format=None):
        '''Write a textual representation to ``buffer``.

        Args
        ----
        buffer : file-like
            Object with a ``write`` method, e.g. :class:`io.StringIO`.
        uncert_format : :class:`measurand.format.UncertaintyFormat`
            Whether and how to include the standard uncertainty.
        symbols : :class:`bool`
            Use the shortest unit name rather than the full name.
        number_format : formatter, optional
            Object with a ``format`` method for numbers; defaults to
            :class:`measurand.format.NumberFormatSI`.
        '''

        units = self.preferred_units
        if units is None:
            buffer.write(f'{self.value_si} [MKS]')
            return
        nf = number_format or NumberFormatSI()
        value = units.from_mks(self.value_si)
        buffer.write(nf.format(value))
        if self.relative_uncertainty and uncert_format != UncertaintyFormat.none:
            uncert = abs(self.value_si) * self.relative_uncertainty / units.conv
            if uncert_format == UncertaintyFormat.parens:
                buffer.write(f'({nf.format(uncert)})')
            elif uncert_format == UncertaintyFormat.plus_minus:
                buffer.write(f' {getattr(nf, "plus_minus", "+/-")} {nf.format(uncert)}')
        singular = abs(value) <= 1
        if symbols:
            name = units.shortest_name(singular)
        else:
            name = units.singular if singular else units.name
        if name != '1':
            buffer.write(' ' + name)

    def __str__(self):
        buffer = io.StringIO()
        self.output_text(buffer)
        return buffer.getvalue()

    def __repr__(self):
        args = [repr(self.value_si)]
        if self.relative_uncertainty:
            args.append(f'uncert={self.relative_uncertainty!r}')
        return f'{type(self).__name__}({", ".join(args)})'

    def to_json(self):
        '''Structured representation: the value (in the preferred units if
        there are any), the name of the preferred units and the relative
        uncertainty if it is non-zero.'''

        m = {}
        if self.preferred_units is not None:
            m['value'] = self.value_in_units(self.preferred_units).to_json()
            m['prefUnits'] = self.preferred_units.name
        else:
            m['value'] = self.value_si.to_json()
        if self.relative_uncertainty:
            m['ur'] = self.relative_uncertainty
        return m


class MiscQuantity(Quantity):
    '''Quantity of arbitrary dimensions, used when no type is registered for them.

    Args
    ----
    value : :class:`measurand.number.Number` or Python number
        Value in ``units``, or in MKS units if ``units`` is omitted.
    dimensions : :class:`measurand.dimensions.Dimensions`, optional
        Defaults to scalar dimensions.
    uncert : :class:`float`
        Relative standard uncertainty.
    units : :class:`measurand.units.Units`, optional
        Units of ``value``; they become the preferred units.
    '''

    def __init__(self, value=0, dimensions=None, uncert=0., *, units=None):
        if dimensions is None:
            dimensions = units.dimensions if units is not None else Dimensions()
        if units is None:
            self._setstate(number.asnumber(value), dimensions, None, uncert)
        else:
            if units.dimensions != dimensions:
                raise DimensionsMismatch(f'expected units of [{dimensions}], got {units.name} of [{units.dimensions}]')
            self._setstate(units.to_mks(value), dimensions, units, uncert)

    def __repr__(self):
        args = [repr(self.value_si), repr(self.dimensions)]
        if self.relative_uncertainty:
            args.append(f'uncert={self.relative_uncertainty!r}')
        return f'MiscQuantity({", ".join(args)})'


## SCALARS

one = Units('one', 1, Dimensions(), abbrev1='1', singular='one')


class Scalar(Quantity, dimensions=Dimensions(), si_units=one):
    'Dimensionless quantity; numbers are promoted to scalars in arithmetic.'


# vim:sw=4:sts=4:et

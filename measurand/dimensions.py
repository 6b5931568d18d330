'''
The dimensions module describes the physical kind of a quantity as a vector
of exponents over the base dimensions:

========== ====== ====================
key        symbol meaning
========== ====== ====================
Length     L      length
Mass       M      mass
Time       T      time
Current    I      electric current
Temperature θ     thermodynamic temperature
Amount     N      amount of substance
Intensity  J      luminous intensity
Angle      Φ      plane angle
SolidAngle Ω      solid angle
========== ====== ====================

Dimensions are immutable and support the algebra of their quantities:

    >>> from measurand.dimensions import Dimensions
    >>> force = Dimensions(Mass=1, Length=1, Time=-2)
    >>> str(force)
    'M*L/T2'
    >>> force * Dimensions(Length=1) == Dimensions(Mass=1, Length=2, Time=-2)
    True
    >>> str(Dimensions(Length=2)**.5)
    'L'

The module also holds the registry that maps dimensions to the quantity type
that represents them, see :func:`Dimensions.to_quantity`.
'''

import fractions
import operator
import treelog as log
from . import config as _config


class DimensionsMismatch(TypeError):
    pass


SYMBOLS = dict(Length='L', Mass='M', Time='T', Current='I', Temperature='θ',
    Amount='N', Intensity='J', Angle='Φ', SolidAngle='Ω')

_KEYS = {symbol: key for key, symbol in SYMBOLS.items()}


def _asfraction(exp):
    try:
        # Fraction supports only a fixed set of input types, so to extend
        # this we first see if we can convert the argument to integer.
        exp = exp.__index__()
    except (AttributeError, TypeError):
        pass
    if isinstance(exp, (int, fractions.Fraction)):
        return fractions.Fraction(exp)
    return fractions.Fraction(float(exp)).limit_denominator(1000)


class Dimensions:
    '''Immutable mapping of base dimension to exponent.

    Args
    ----
    powers : :class:`dict`, optional
        Exponents by base dimension key.
    **powers :
        Exponents by base dimension key, merged with the positional mapping.
    '''

    __slots__ = '_powers',

    def __init__(*args, **powers):
        if not 1 <= len(args) <= 2:
            raise TypeError(f'Dimensions takes at most 1 positional argument but {len(args)-1} were given')
        self, *mapping = args
        if mapping:
            base, = mapping
            powers = dict(base._powers if isinstance(base, Dimensions) else base, **powers)
        for key in powers:
            if key not in SYMBOLS:
                raise ValueError(f'unknown base dimension {key!r}')
        object.__setattr__(self, '_powers', {key: _asfraction(power) for key, power in powers.items() if power})

    def __setattr__(self, name, value):
        raise AttributeError('readonly attribute: {}'.format(name))

    @classmethod
    def parse(cls, s):
        '''Reverse of :func:`str`, e.g. ``Dimensions.parse('M*L/T2')``.'''

        powers = {}
        for symbol, power, isnumer in _split_factors(s):
            if symbol not in _KEYS:
                raise ValueError(f'invalid dimension string {s!r}')
            key = _KEYS[symbol]
            powers[key] = powers.get(key, 0) + (power if isnumer else -power)
        return cls(powers)

    @classmethod
    def __stringly_loads__(cls, s):
        return cls.parse(s)

    @classmethod
    def __stringly_dumps__(cls, v):
        return str(v)

    def items(self):
        return self._powers.items()

    def component_exponent(self, key):
        '''Exponent of base dimension ``key``, zero if absent.

        Integral exponents are returned as :class:`int`, others as
        :class:`fractions.Fraction`.'''

        if key not in SYMBOLS:
            raise ValueError(f'unknown base dimension {key!r}')
        power = self._powers.get(key, 0)
        return int(power) if power == int(power) else power

    @property
    def isscalar(self):
        return not self._powers

    @property
    def isscalarsi(self):
        'Scalar in strict SI, where plane and solid angles are dimensionless.'

        return all(key in ('Angle', 'SolidAngle') for key in self._powers)

    @staticmethod
    def _binop(op, a, b):
        return Dimensions({key: op(a.get(key, 0), b.get(key, 0)) for key in set(a) | set(b)})

    def multiply(self, other):
        return self._binop(operator.add, self._powers, other._powers)

    def divide(self, other):
        return self._binop(operator.sub, self._powers, other._powers)

    def invert(self):
        return Dimensions({key: -power for key, power in self._powers.items()})

    inverse = invert

    def power(self, exp):
        exp = _asfraction(exp)
        return Dimensions({key: power * exp for key, power in self._powers.items()})

    def __mul__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other):
        return self.power(other)

    def __eq__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self._powers == other._powers

    def __hash__(self):
        return hash(frozenset(self._powers.items()))

    def __bool__(self):
        return bool(self._powers)

    def __str__(self):
        return ''.join(('*' if power > 0 else '/') + SYMBOLS[key]
                     + (str(abs(power.numerator)) if abs(power.numerator) != 1 else '')
                     + ('_'+str(abs(power.denominator)) if abs(power.denominator) != 1 else '')
            for key, power in sorted(self._powers.items(), key=lambda item: (item[1], SYMBOLS[item[0]]), reverse=True)).lstrip('*')

    def __repr__(self):
        return 'Dimensions({})'.format(', '.join(f'{key}={power}' for key, power in sorted(self._powers.items())))

    def to_quantity(self, value, units=None, uncert=0., *, config=None):
        '''Create the most specific quantity for these dimensions.

        Args
        ----
        value : :class:`measurand.number.Number` or Python number
            Value in ``units``, or in MKS units if ``units`` is omitted.
        units : :class:`measurand.units.Units`, optional
            Units of ``value``; they become the preferred units of the result.
        uncert : :class:`float`
            Relative standard uncertainty.
        config : configuration, optional
            Settings to use instead of :mod:`measurand.config`.

        Returns
        -------
        :class:`measurand.quantity.Quantity`
            An instance of the type registered for these dimensions, or a
            :class:`measurand.quantity.MiscQuantity` if there is none or if
            ``config.dynamic_typing`` is false.
        '''

        if config is None:
            config = _config
        factory = registry.lookup(self) if config.dynamic_typing else None
        if factory is None:
            from .quantity import MiscQuantity
            return MiscQuantity(value, self, uncert, units=units)
        return factory(value, units, uncert)


class Registry:
    '''Mapping of :class:`Dimensions` to quantity factories.'''

    def __init__(self):
        self._factories = {}

    def register(self, dimensions, factory):
        if dimensions in self._factories:
            raise ValueError(f'cannot register {factory.__name__}: dimensions [{dimensions}] are already taken by {self._factories[dimensions].__name__}')
        log.debug(f'registering {factory.__name__} for [{dimensions}]')
        self._factories[dimensions] = factory

    def lookup(self, dimensions):
        return self._factories.get(dimensions)

    def __contains__(self, dimensions):
        return dimensions in self._factories

    def __len__(self):
        return len(self._factories)


registry = Registry()


def _split_factors(s):
    for parts in s.split('*'):
        isnumer = True
        for factor in parts.split('/'):
            if factor:
                base = factor.rstrip('0123456789_')
                numer, sep, denom = factor[len(base):].partition('_')
                power = fractions.Fraction(int(numer or 1), int(denom or 1))
                yield base, power, isnumer
            isnumer = False


# vim:sw=4:sts=4:et

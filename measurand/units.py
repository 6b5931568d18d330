'''
The units module defines :class:`Units`, a named conversion between a value
expressed in some unit and the same value in MKS base units.

    >>> from measurand.units import Units
    >>> from measurand.dimensions import Dimensions
    >>> meters = Units('meters', 1, Dimensions(Length=1), abbrev1='m', singular='meter', metric_base=True)
    >>> millimeters = meters.milli()
    >>> millimeters.name, millimeters.abbrev1
    ('millimeters', 'mm')
    >>> millimeters.to_mks(1000)
    Double(1.0)

Affine units, such as temperature scales, carry an offset that is added
before scaling:

    >>> celsius = Units('degrees Celsius', 1, Dimensions(Temperature=1), abbrev1='°C', singular='degree Celsius', offset=273.15)
    >>> celsius.to_mks(0)
    Double(273.15)

Compound units are formed with :func:`product`, :func:`quotient` and
:func:`power`, or the equivalent operators:

    >>> seconds = Units('seconds', 1, Dimensions(Time=1), abbrev1='s', singular='second', metric_base=True)
    >>> (meters / seconds**2).name
    'meters per second squared'
'''

from functools import partialmethod
import numbers
from . import number, config, warnings
from .dimensions import Dimensions, registry


class Units:
    '''Named unit of measurement.

    Args
    ----
    name : :class:`str`
        Plural name, e.g. ``'meters'``.
    conv : :class:`measurand.number.Number` or Python number
        Conversion factor to MKS units.
    dimensions : :class:`measurand.dimensions.Dimensions`
        Dimensions of the quantities measured in these units.
    abbrev1 : :class:`str`, optional
        Primary abbreviation, e.g. ``'m'``.
    abbrev2 : :class:`str`, optional
        Alternative abbreviation.
    singular : :class:`str`, optional
        Singular name; defaults to ``name``.
    metric_base : :class:`bool`
        Whether metric prefixes may be applied.
    offset : :class:`measurand.number.Number` or Python number
        Offset added to a value before it is scaled by ``conv``.
    '''

    def __init__(self, name, conv, dimensions, *, abbrev1=None, abbrev2=None, singular=None, metric_base=False, offset=0):
        if not isinstance(dimensions, Dimensions):
            dimensions = Dimensions(dimensions)
        self.__dict__.update(
            name=name,
            conv=number.asnumber(conv),
            dimensions=dimensions,
            abbrev1=abbrev1,
            abbrev2=abbrev2,
            singular=singular if singular is not None else name,
            metric_base=metric_base,
            offset=number.asnumber(offset))

    def __setattr__(self, name, value):
        raise AttributeError('readonly attribute: {}'.format(name))

    def to_mks(self, value):
        '''Convert ``value`` in these units to MKS units.'''

        value = number.asnumber(value)
        if self.offset:
            value = value + self.offset
        return value * self.conv

    def from_mks(self, value):
        '''Convert ``value`` in MKS units to these units.'''

        value = number.asnumber(value) / self.conv
        if self.offset:
            value = value - self.offset
        return value

    def derive(self, prefix, abbrev_prefix, multiplier):
        '''Create units that are ``multiplier`` times these units.

        The names and abbreviations of the new units are those of these units
        preceded by ``prefix`` and ``abbrev_prefix``, respectively. Derived
        units have no offset and are not a metric base.'''

        return Units(prefix + self.name, self.conv * multiplier, self.dimensions,
            abbrev1=abbrev_prefix + self.abbrev1 if self.abbrev1 else None,
            abbrev2=abbrev_prefix + self.abbrev2 if self.abbrev2 else None,
            singular=prefix + self.singular)

    def _prefixed(self, prefix, abbrev_prefix, exponent):
        if not self.metric_base:
            if not config.lenient:
                raise ValueError(f'cannot apply prefix {prefix!r}: {self.name} is not a metric base unit')
            warnings.legacy(f'applying prefix {prefix!r} to {self.name}, which is not a metric base unit')
        return self.derive(prefix, abbrev_prefix, number.Integer(10)**exponent)

    yotta = partialmethod(_prefixed, 'yotta', 'Y', 24)
    zetta = partialmethod(_prefixed, 'zetta', 'Z', 21)
    exa = partialmethod(_prefixed, 'exa', 'E', 18)
    peta = partialmethod(_prefixed, 'peta', 'P', 15)
    tera = partialmethod(_prefixed, 'tera', 'T', 12)
    giga = partialmethod(_prefixed, 'giga', 'G', 9)
    mega = partialmethod(_prefixed, 'mega', 'M', 6)
    kilo = partialmethod(_prefixed, 'kilo', 'k', 3)
    hecto = partialmethod(_prefixed, 'hecto', 'h', 2)
    deka = partialmethod(_prefixed, 'deka', 'da', 1)
    deci = partialmethod(_prefixed, 'deci', 'd', -1)
    centi = partialmethod(_prefixed, 'centi', 'c', -2)
    milli = partialmethod(_prefixed, 'milli', 'm', -3)
    micro = partialmethod(_prefixed, 'micro', 'μ', -6)
    nano = partialmethod(_prefixed, 'nano', 'n', -9)
    pico = partialmethod(_prefixed, 'pico', 'p', -12)
    femto = partialmethod(_prefixed, 'femto', 'f', -15)
    atto = partialmethod(_prefixed, 'atto', 'a', -18)
    zepto = partialmethod(_prefixed, 'zepto', 'z', -21)
    yocto = partialmethod(_prefixed, 'yocto', 'y', -24)

    def shortest_name(self, singular=False):
        '''Shortest of the abbreviations and the (singular) name.'''

        names = self.abbrev1, self.abbrev2, self.singular if singular else self.name
        return min(filter(None, names), key=len)

    @property
    def quantity_type(self):
        'The quantity type registered for the dimensions of these units, or None.'

        return registry.lookup(self.dimensions)

    def __mul__(self, other):
        if not isinstance(other, Units):
            return NotImplemented
        return product(self, other)

    def __rmul__(self, value):
        return self.dimensions.to_quantity(value, self)

    def __truediv__(self, other):
        if not isinstance(other, Units):
            return NotImplemented
        return quotient(self, other)

    def __pow__(self, n):
        return power(self, n)

    def __eq__(self, other):
        if not isinstance(other, Units):
            return NotImplemented
        return (self.name, self.conv, self.offset, self.dimensions) == (other.name, other.conv, other.offset, other.dimensions)

    def __hash__(self):
        return hash((self.name, self.conv, self.offset, self.dimensions))

    def __repr__(self):
        return f'Units({self.name!r}, {self.conv!r}, {self.dimensions!r})'

    def __str__(self):
        return self.name


def _linear(*units):
    for u in units:
        if u.offset:
            raise ValueError(f'cannot combine {u.name}: units with an offset are not linear')


def _join(fmt, a, b):
    return fmt.format(a, b) if a and b else None


def product(a, b):
    '''Units of the product of quantities measured in ``a`` and ``b``.'''

    _linear(a, b)
    return Units(f'{a.singular} {b.name}', a.conv * b.conv, a.dimensions * b.dimensions,
        abbrev1=_join('{}*{}', a.abbrev1, b.abbrev1),
        abbrev2=_join('{}{}', a.abbrev2, b.abbrev2),
        singular=f'{a.singular} {b.singular}')


def quotient(a, b):
    '''Units of the quotient of quantities measured in ``a`` and ``b``.'''

    _linear(a, b)
    return Units(f'{a.name} per {b.singular}', a.conv / b.conv, a.dimensions / b.dimensions,
        abbrev1=_join('{} / {}', a.abbrev1, b.abbrev1),
        abbrev2=_join('{}/{}', a.abbrev2, b.abbrev2),
        singular=f'{a.singular} per {b.singular}')


def power(a, n):
    '''Units of a quantity measured in ``a`` raised to the integer power ``n``.'''

    if isinstance(n, number.Number) and n.isinteger or isinstance(n, float) and n.is_integer():
        n = int(n)
    if not isinstance(n, numbers.Integral):
        raise TypeError(f'units can only be raised to an integer power, got {n!r}')
    n = int(n)
    _linear(a)
    suffix = {2: ' squared', 3: ' cubed'}.get(n, f' to the power {n}')
    return Units(a.name + suffix, a.conv**n, a.dimensions**n,
        abbrev1=f'{a.abbrev1}^{n}' if a.abbrev1 else None,
        abbrev2=f'{a.abbrev2}{n}' if a.abbrev2 else None,
        singular=a.singular + suffix)


# vim:sw=4:sts=4:et

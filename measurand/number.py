'''
The number module provides the numeric tower on which all quantity values are
built. A value is one of five immutable variants:

* :class:`Integer`, an exact integer of arbitrary range;
* :class:`Double`, an IEEE 754 double including NaN and infinities;
* :class:`Precise`, a decimal with a configurable number of significant digits;
* :class:`Imaginary`, a real magnitude times the imaginary unit;
* :class:`Complex`, a pair of real and imaginary parts.

The first three are subtypes of :class:`Real`. Arithmetic between any two
variants, as well as between a variant and a plain Python number, yields the
variant of the most general operand:

    >>> from measurand.number import Integer, Double, Precise, Imaginary, Complex
    >>> Integer(2) + Double(.5)
    Double(2.5)
    >>> Integer(3) * Imaginary(2)
    Imaginary(Integer(6))
    >>> Imaginary(2) * Imaginary(3)
    Integer(-6)
    >>> Complex(3, 4).reciprocal()
    Complex(Double(0.12), Double(-0.16))

Division of integers stays exact when it can:

    >>> Integer(6) / 3
    Integer(2)
    >>> Integer(1) / 4
    Double(0.25)

The truncating division ``//`` rounds towards zero, ``%`` is the Euclidean
modulo and :meth:`Number.remainder` is the remainder of the truncating
division:

    >>> Integer(-7) // 2, Integer(-7) % 2, Integer(-7).remainder(2)
    (Integer(-3), Integer(1), Integer(-1))

Operations that have no meaningful result raise :class:`UnsupportedOperation`,
unless :attr:`measurand.config.lenient` is set.
'''

import abc
import decimal
import fractions
import math
import numbers
import numpy
from . import config, warnings


class UnsupportedOperation(ArithmeticError):
    pass


def asnumber(obj):
    '''Convert a Python number to the corresponding :class:`Number` variant.

    Args
    ----
    obj : :class:`int`, :class:`float`, :class:`complex`, :class:`decimal.Decimal`, :class:`fractions.Fraction` or :class:`Number`
        The value to convert. Numpy scalars are accepted as well.

    Returns
    -------
    :class:`Number`
    '''

    if isinstance(obj, Number):
        return obj
    if isinstance(obj, numbers.Integral):
        return Integer(int(obj))
    if isinstance(obj, decimal.Decimal):
        return Precise(obj)
    if isinstance(obj, fractions.Fraction):
        return Integer(obj.numerator) if obj.denominator == 1 else Double(float(obj))
    if isinstance(obj, numbers.Real):
        return Double(float(obj))
    if isinstance(obj, numbers.Complex):
        return Complex(Double(obj.real), Double(obj.imag))
    raise TypeError(f'cannot convert {type(obj).__name__} to a number')


def _unsupported(message, default):
    if config.lenient:
        warnings.legacy(f'{message}; returning {default!r}')
        return default
    raise UnsupportedOperation(message)


# Identity element of every binary operation, substituted for a None operand
# in lenient mode.
_IDENTITY = dict(add=0, sub=0, mul=1, truediv=1, floordiv=1, mod=0, pow=1)


def _binary(name):
    def op(self, other):
        if other is None and config.lenient:
            warnings.legacy(f'operand of {name} is None; treating it as the identity')
            return self
        try:
            other = asnumber(other)
        except TypeError:
            return NotImplemented
        return _DISPATCH[name][self._kind, other._kind](self, other)
    def rop(self, other):
        if other is None and config.lenient:
            warnings.legacy(f'operand of {name} is None; treating it as the identity')
            other = _IDENTITY[name]
        try:
            other = asnumber(other)
        except TypeError:
            return NotImplemented
        return _DISPATCH[name][other._kind, self._kind](other, self)
    return op, rop


def _promoted(x, y):
    # a float meeting a decimal is compared through its shortest repr, the
    # same conversion Precise applies to floats
    if isinstance(x, float) and isinstance(y, decimal.Decimal):
        return decimal.Decimal(repr(x)), y
    if isinstance(x, decimal.Decimal) and isinstance(y, float):
        return x, decimal.Decimal(repr(y))
    return x, y


def _hashkey(x):
    # decimals that equal a float under _promoted hash like that float
    if isinstance(x, decimal.Decimal) and x.is_finite():
        f = float(x)
        if decimal.Decimal(repr(f)) == x:
            return f
    return x


def _comparison(op):
    def cmp(self, other):
        try:
            other = asnumber(other)
        except TypeError:
            return NotImplemented
        if self.isnan or other.isnan:
            return False
        return op(*_promoted(self._order_key(), other._order_key()))
    return cmp


class Number(metaclass=abc.ABCMeta):
    '''Abstract base class of all numeric variants.

    Numbers compare equal if they represent the same value, regardless of
    their variant, and equal numbers hash equal, also to the corresponding
    Python :class:`int`, :class:`float` or :class:`complex`.
    '''

    __slots__ = ()

    _kind = None

    def __setattr__(self, name, value):
        raise AttributeError('readonly attribute: {}'.format(name))

    def __delattr__(self, name):
        raise AttributeError('readonly attribute: {}'.format(name))

    @abc.abstractmethod
    def _parts(self):
        'real and imaginary part as Python numbers'

    @abc.abstractmethod
    def _order_key(self):
        'Python number by which this value is ordered'

    __add__, __radd__ = _binary('add')
    __sub__, __rsub__ = _binary('sub')
    __mul__, __rmul__ = _binary('mul')
    __truediv__, __rtruediv__ = _binary('truediv')
    __floordiv__, __rfloordiv__ = _binary('floordiv')
    __mod__, __rmod__ = _binary('mod')
    __pow__, __rpow__ = _binary('pow')

    __lt__ = _comparison(lambda a, b: a < b)
    __le__ = _comparison(lambda a, b: a <= b)
    __gt__ = _comparison(lambda a, b: a > b)
    __ge__ = _comparison(lambda a, b: a >= b)

    def __eq__(self, other):
        try:
            other = asnumber(other)
        except TypeError:
            return NotImplemented
        re1, im1 = self._parts()
        re2, im2 = other._parts()
        re1, re2 = _promoted(re1, re2)
        im1, im2 = _promoted(im1, im2)
        return re1 == re2 and im1 == im2

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        re, im = map(_hashkey, self._parts())
        return hash(re) if im == 0 else hash(complex(re, im))

    def __pos__(self):
        return self

    def __bool__(self):
        re, im = self._parts()
        return bool(re) or bool(im)

    def __complex__(self):
        re, im = self._parts()
        return complex(re, im)

    def __float__(self):
        return float(self._parts()[0])

    def __round__(self, ndigits=None):
        if ndigits is not None:
            return round(float(self), ndigits)
        return self.round()

    def __trunc__(self):
        return self.truncate()

    def __floor__(self):
        return self.floor()

    def __ceil__(self):
        return self.ceil()

    def remainder(self, divisor):
        '''Remainder of the truncating division by ``divisor``.

        The result ``r`` satisfies ``self == (self // divisor) * divisor + r``
        and has the sign of ``self``.'''

        divisor = asnumber(divisor)
        return _DISPATCH['remainder'][self._kind, divisor._kind](self, divisor)

    def reciprocal(self):
        return Integer(1) / self

    def compare(self, other):
        '''Compare with ``other``, returning -1, 0 or 1.

        NaN is considered larger than any other value. Imaginary and complex
        values are ordered by their real part. In lenient mode a ``None``
        argument is compared as zero.'''

        if other is None and config.lenient:
            warnings.legacy('comparing with None; treating it as zero')
            other = Integer(0)
        other = asnumber(other)
        if self.isnan or other.isnan:
            return (self.isnan) - (other.isnan)
        a, b = _promoted(self._order_key(), other._order_key())
        return (a > b) - (a < b)

    def clamp(self, lower, upper):
        '''Return this number limited to the range ``lower`` to ``upper``.'''

        lower = asnumber(lower)
        upper = asnumber(upper)
        if lower.compare(upper) > 0:
            raise ValueError(f'lower limit {lower} exceeds upper limit {upper}')
        if self.compare(lower) < 0:
            return lower
        if self.compare(upper) > 0:
            return upper
        return self

    @property
    def sign(self):
        'Minus one, zero or plus one, as Integer for integral values and Double otherwise.'

        if self.isnan:
            return Double(math.nan)
        s = -1 if self.isnegative else 0 if not self else 1
        return Integer(s) if self.isinteger else Double(s)

    @property
    def isfinite(self):
        return not self.isinfinite and not self.isnan

    @property
    def isinteger(self):
        return False

    def to_json(self):
        '''Structured representation, see :meth:`from_json` for the reverse.'''

        raise NotImplementedError

    @staticmethod
    def from_json(m):
        '''Reconstruct a number from the mapping returned by :meth:`to_json`.

        The variant is detected from the keys of the mapping.'''

        if 'real' in m:
            return Complex(Number.from_json(m['real']), Number.from_json(m['imag']))
        if 'imag' in m:
            return Imaginary(Number.from_json(m['imag']))
        if 'pd' in m:
            return Precise(m['pd'], m.get('sig'))
        if 'd' in m:
            return Double(m['d'])
        if 'i' in m:
            return Integer(m['i'])
        raise ValueError(f'cannot detect number type of {m!r}')


## REAL NUMBERS

class Real(Number):
    '''Abstract base class of the real variants.'''

    __slots__ = 'value',

    _kind = 'real'

    def _parts(self):
        return self.value, 0

    def _order_key(self):
        return self.value

    def __repr__(self):
        return f'{type(self).__name__}({self.value!r})'

    def __str__(self):
        return str(self.value)

    def __format__(self, format_spec):
        return format(self.value, format_spec) if format_spec else str(self)

    def __int__(self):
        return int(self.value)

    def __abs__(self):
        return -self if self.isnegative else self

    @property
    def isnan(self):
        return False

    @property
    def isinfinite(self):
        return False

    @property
    def isnegative(self):
        return self.value < 0

    def ceil(self):
        return Integer(math.ceil(self.value))

    def floor(self):
        return Integer(math.floor(self.value))

    def truncate(self):
        return Integer(math.trunc(self.value))

    def round(self):
        'Round to the nearest Integer, half away from zero.'

        if self.isnan or self.isinfinite:
            raise ValueError(f'cannot round {self}')
        return Integer(int(decimal.Decimal(self.value).to_integral_value(rounding=decimal.ROUND_HALF_UP)))

    def sqrt(self):
        '''Square root; the root of a negative number is :class:`Imaginary`.'''

        if self.isnegative and not self.isnan:
            return Imaginary((-self).sqrt())
        return self._sqrt()


class Integer(Real):
    '''Exact integer of arbitrary range.'''

    __slots__ = ()

    def __init__(self, value=0):
        if not isinstance(value, numbers.Integral):
            raise TypeError(f'Integer requires an integral value, got {type(value).__name__}')
        object.__setattr__(self, 'value', int(value))

    def __neg__(self):
        return Integer(-self.value)

    def __index__(self):
        return self.value

    @property
    def isinteger(self):
        return True

    def ceil(self):
        return self

    floor = truncate = round = ceil

    def _sqrt(self):
        root = math.isqrt(self.value)
        return Integer(root) if root * root == self.value else Double(math.sqrt(self.value))

    def to_json(self):
        return dict(i=self.value)

    @staticmethod
    def _cast(n, other):
        return n.value

    @staticmethod
    def _add(x, y):
        return Integer(x + y)

    @staticmethod
    def _sub(x, y):
        return Integer(x - y)

    @staticmethod
    def _mul(x, y):
        return Integer(x * y)

    @staticmethod
    def _truediv(x, y):
        if y == 0:
            return Double._truediv(float(x), float(y))
        q, r = divmod(x, y)
        return Integer(q) if r == 0 else Double(x / y)

    @staticmethod
    def _floordiv(x, y):
        if y == 0:
            raise ZeroDivisionError('integer division by zero')
        q = abs(x) // abs(y)
        return Integer(q if (x < 0) == (y < 0) else -q)

    @staticmethod
    def _mod(x, y):
        if y == 0:
            raise ZeroDivisionError('integer modulo by zero')
        return Integer(x % abs(y))

    @staticmethod
    def _remainder(x, y):
        if y == 0:
            raise ZeroDivisionError('integer modulo by zero')
        r = abs(x) % abs(y)
        return Integer(-r if x < 0 else r)

    @staticmethod
    def _pow(x, y):
        if y >= 0:
            return Integer(x ** y)
        if x == 0:
            return Double(math.inf)
        return Integer._truediv(1, x ** -y)


class Double(Real):
    '''IEEE 754 double precision value.

    Division by zero follows IEEE 754 rather than raising:

    >>> Double(1) / 0, Double(-1) / 0
    (Double(inf), Double(-inf))
    '''

    __slots__ = ()

    def __init__(self, value=0.):
        object.__setattr__(self, 'value', float(value))

    def __neg__(self):
        return Double(-self.value)

    @property
    def isnan(self):
        return math.isnan(self.value)

    @property
    def isinfinite(self):
        return math.isinf(self.value)

    @property
    def isnegative(self):
        return math.copysign(1., self.value) < 0 and not self.isnan

    @property
    def isinteger(self):
        return self.value.is_integer()

    def _sqrt(self):
        return Double(math.sqrt(self.value))

    def to_json(self):
        return dict(d=self.value)

    @staticmethod
    def _cast(n, other):
        return float(n.value)

    @staticmethod
    def _add(x, y):
        return Double(x + y)

    @staticmethod
    def _sub(x, y):
        return Double(x - y)

    @staticmethod
    def _mul(x, y):
        return Double(x * y)

    @staticmethod
    def _truediv(x, y):
        with numpy.errstate(divide='ignore', invalid='ignore'):
            return Double(numpy.true_divide(x, y))

    @staticmethod
    def _floordiv(x, y):
        with numpy.errstate(divide='ignore', invalid='ignore'):
            return Double(numpy.trunc(numpy.true_divide(x, y)))

    @staticmethod
    def _mod(x, y):
        with numpy.errstate(invalid='ignore'):
            r = float(numpy.fmod(x, y))
        return Double(r + abs(y) if r < 0 else r)

    @staticmethod
    def _remainder(x, y):
        with numpy.errstate(invalid='ignore'):
            return Double(numpy.fmod(x, y))

    @staticmethod
    def _pow(x, y):
        with numpy.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return Double(numpy.power(x, y))


def _context(*args):
    prec = max(arg.sigdigits for arg in args if isinstance(arg, Precise))
    return decimal.Context(prec=prec, traps=[])


class Precise(Real):
    '''Arbitrary precision decimal value.

    The number of significant digits defaults to :attr:`measurand.config.precision`.
    Floats are converted via their shortest representation, so that
    ``Precise(.1)`` equals ``Precise('.1')``. Operations between Precise values
    are carried out with the larger of the two digit counts.

    >>> Precise(1, 5) / 3
    Precise(Decimal('0.33333'))
    '''

    __slots__ = 'sigdigits',

    def __init__(self, value=0, sigdigits=None):
        if sigdigits is None:
            sigdigits = config.precision
        if isinstance(value, Real):
            value = value.value
        if isinstance(value, float):
            value = repr(value)
        object.__setattr__(self, 'sigdigits', int(sigdigits))
        object.__setattr__(self, 'value', decimal.Context(prec=self.sigdigits, traps=[]).plus(decimal.Decimal(value)))

    def __neg__(self):
        return Precise(self.value.copy_negate(), self.sigdigits)

    def __float__(self):
        return float(self.value)

    @property
    def isnan(self):
        return self.value.is_nan()

    @property
    def isinfinite(self):
        return self.value.is_infinite()

    @property
    def isnegative(self):
        return self.value.is_signed() and not self.isnan

    @property
    def isinteger(self):
        return self.value.is_finite() and self.value == self.value.to_integral_value()

    def ceil(self):
        return Integer(int(self.value.to_integral_value(rounding=decimal.ROUND_CEILING)))

    def floor(self):
        return Integer(int(self.value.to_integral_value(rounding=decimal.ROUND_FLOOR)))

    def _sqrt(self):
        return Precise(_context(self).sqrt(self.value), self.sigdigits)

    def to_json(self):
        return dict(pd=str(self.value), sig=self.sigdigits)

    @staticmethod
    def _cast(n, other):
        if isinstance(n, Precise):
            return n
        return Precise(n.value, other.sigdigits if isinstance(other, Precise) else None)

    @staticmethod
    def _op(method, x, y):
        return Precise(getattr(_context(x, y), method)(x.value, y.value), max(x.sigdigits, y.sigdigits))

    @staticmethod
    def _add(x, y):
        return Precise._op('add', x, y)

    @staticmethod
    def _sub(x, y):
        return Precise._op('subtract', x, y)

    @staticmethod
    def _mul(x, y):
        return Precise._op('multiply', x, y)

    @staticmethod
    def _truediv(x, y):
        return Precise._op('divide', x, y)

    @staticmethod
    def _floordiv(x, y):
        return Precise._op('divide_int', x, y)

    @staticmethod
    def _mod(x, y):
        r = Precise._op('remainder', x, y)
        return r + abs(y) if r.isnegative else r

    @staticmethod
    def _remainder(x, y):
        return Precise._op('remainder', x, y)

    @staticmethod
    def _pow(x, y):
        return Precise._op('power', x, y)


# Promotion on the real axis: the variant of the result of a binary operation
# between two reals.
_PROMOTION = {
    (Integer, Integer): Integer,
    (Integer, Double): Double,
    (Integer, Precise): Precise,
    (Double, Integer): Double,
    (Double, Double): Double,
    (Double, Precise): Precise,
    (Precise, Integer): Precise,
    (Precise, Double): Precise,
    (Precise, Precise): Precise,
}


def _real(name):
    def apply(a, b):
        T = _PROMOTION[type(a), type(b)]
        return getattr(T, '_' + name)(T._cast(a, b), T._cast(b, a))
    return apply


def _real_pow(a, b):
    if a.isnegative and not b.isinteger and not a.isinfinite:
        return _polar(float(abs(a)) ** float(b), math.pi * float(b))
    return _real('pow')(a, b)


## IMAGINARY AND COMPLEX NUMBERS

class Imaginary(Number):
    '''A real magnitude times the imaginary unit.'''

    __slots__ = 'value',

    _kind = 'imaginary'

    def __init__(self, value=0):
        value = asnumber(value)
        if not isinstance(value, Real):
            raise TypeError(f'Imaginary requires a real value, got {type(value).__name__}')
        object.__setattr__(self, 'value', value)

    def _parts(self):
        return 0, self.value.value

    def _order_key(self):
        return 0

    def __repr__(self):
        return f'Imaginary({self.value!r})'

    def __str__(self):
        return f'{self.value}i'

    def __format__(self, format_spec):
        return format(self.value, format_spec) + 'i' if format_spec else str(self)

    def __int__(self):
        return 0

    def __neg__(self):
        return Imaginary(-self.value)

    def __abs__(self):
        return abs(self.value)

    @property
    def isnan(self):
        return self.value.isnan

    @property
    def isinfinite(self):
        return self.value.isinfinite

    @property
    def isnegative(self):
        return self.value.isnegative

    @property
    def isinteger(self):
        return not self.value

    def ceil(self):
        return Imaginary(self.value.ceil())

    def floor(self):
        return Imaginary(self.value.floor())

    def truncate(self):
        return Imaginary(self.value.truncate())

    def round(self):
        return Imaginary(self.value.round())

    def to_json(self):
        return dict(imag=self.value.to_json())


class Complex(Number):
    '''A pair of real and imaginary parts.

    >>> z = Complex(3, 4)
    >>> abs(z)
    Integer(5)
    >>> z * z.conjugate
    Complex(Integer(25), Integer(0))
    '''

    __slots__ = 'real', 'imag'

    _kind = 'complex'

    def __init__(self, real=0, imag=0):
        if isinstance(imag, Imaginary):
            imag = imag.value
        real = asnumber(real)
        imag = asnumber(imag)
        if not isinstance(real, Real) or not isinstance(imag, Real):
            raise TypeError('Complex requires real components')
        object.__setattr__(self, 'real', real)
        object.__setattr__(self, 'imag', imag)

    def _parts(self):
        return self.real.value, self.imag.value

    def _order_key(self):
        return self.real.value

    def __repr__(self):
        return f'Complex({self.real!r}, {self.imag!r})'

    def __str__(self):
        if self.imag.isnegative:
            return f'{self.real} - {-self.imag}i'
        return f'{self.real} + {self.imag}i'

    def __format__(self, format_spec):
        if not format_spec:
            return str(self)
        sign = '-' if self.imag.isnegative else '+'
        return f'{format(self.real, format_spec)} {sign} {format(abs(self.imag), format_spec)}i'

    def __int__(self):
        return int(self.real)

    def __neg__(self):
        return Complex(-self.real, -self.imag)

    def __abs__(self):
        return self.modulus

    @property
    def imaginary(self):
        return Imaginary(self.imag)

    @property
    def conjugate(self):
        return Complex(self.real, -self.imag)

    @property
    def absolute_square(self):
        return self.real * self.real + self.imag * self.imag

    @property
    def modulus(self):
        'Magnitude in the complex plane.'

        return self.absolute_square.sqrt()

    norm = modulus

    @property
    def argument(self):
        'Angle with the positive real axis, in radians.'

        return Double(math.atan2(float(self.imag), float(self.real)))

    phase = argument

    @property
    def isnan(self):
        return self.real.isnan or self.imag.isnan

    @property
    def isinfinite(self):
        return self.real.isinfinite or self.imag.isinfinite

    @property
    def isnegative(self):
        return self.real.isnegative

    @property
    def isinteger(self):
        return not self.imag and self.real.isinteger

    def ceil(self):
        return Complex(self.real.ceil(), self.imag.ceil())

    def floor(self):
        return Complex(self.real.floor(), self.imag.floor())

    def truncate(self):
        return Complex(self.real.truncate(), self.imag.truncate())

    def round(self):
        return Complex(self.real.round(), self.imag.round())

    def to_json(self):
        return dict(real=self.real.to_json(), imag=self.imag.to_json())


def _ascomplex(n):
    if n._kind == 'complex':
        return n
    if n._kind == 'imaginary':
        return Complex(Integer(0), n.value)
    return Complex(n, Integer(0))


def _polar(modulus, phase):
    return Complex(Double(modulus * math.cos(phase)), Double(modulus * math.sin(phase)))


def _signed_infinity(dividend):
    dividend = _ascomplex(dividend)
    return Complex(Double(-math.inf if dividend.real < 0 else math.inf),
                   Double(-math.inf if dividend.imag < 0 else math.inf))


def _complex_add(a, b):
    a, b = _ascomplex(a), _ascomplex(b)
    return Complex(a.real + b.real, a.imag + b.imag)


def _complex_sub(a, b):
    a, b = _ascomplex(a), _ascomplex(b)
    return Complex(a.real - b.real, a.imag - b.imag)


def _complex_mul(a, b):
    # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
    a, b = _ascomplex(a), _ascomplex(b)
    return Complex(a.real * b.real - a.imag * b.imag, a.real * b.imag + a.imag * b.real)


def _complex_truediv(a, b):
    # (a+bi)/(c+di) = ((ac+bd) + (bc-ad)i) / (c²+d²)
    a, b = _ascomplex(a), _ascomplex(b)
    if not b:
        return _signed_infinity(a)
    c2d2 = b.absolute_square
    return Complex((a.real * b.real + a.imag * b.imag) / c2d2, (a.imag * b.real - a.real * b.imag) / c2d2)


def _complex_floordiv(a, b):
    if not b:
        return _signed_infinity(a)
    return (a / b).truncate()


def _complex_pow(a, b):
    a = _ascomplex(a)
    if b.isinteger:
        n = int(b)
        base = a if n >= 0 else a.reciprocal()
        result = Complex(Integer(1), Integer(0))
        for bit in bin(abs(n))[:1:-1]:
            if bit == '1':
                result = _complex_mul(result, base)
            base = _complex_mul(base, base)
        return result
    modulus = float(a.modulus)
    return _polar(modulus ** float(b), float(b) * float(a.argument))


def _unsupported_op(name, default):
    def apply(a, b):
        return _unsupported(f'{name} is not supported for {type(a).__name__} and {type(b).__name__}', default)
    return apply


def _table(realop, imag_real, real_imag, imag_imag, other):
    return {
        ('real', 'real'): realop,
        ('imaginary', 'real'): imag_real,
        ('real', 'imaginary'): real_imag,
        ('imaginary', 'imaginary'): imag_imag,
        ('complex', 'real'): other,
        ('complex', 'imaginary'): other,
        ('complex', 'complex'): other,
        ('real', 'complex'): other,
        ('imaginary', 'complex'): other,
    }


# Dispatch tables of all binary operations, keyed by the kinds of the left and
# right operand.
_DISPATCH = dict(
    add=_table(_real('add'),
        lambda a, b: Complex(b, a.value),
        lambda a, b: Complex(a, b.value),
        lambda a, b: Imaginary(a.value + b.value),
        _complex_add),
    sub=_table(_real('sub'),
        lambda a, b: Complex(-b, a.value),
        lambda a, b: Complex(a, -b.value),
        lambda a, b: Imaginary(a.value - b.value),
        _complex_sub),
    mul=_table(_real('mul'),
        lambda a, b: Imaginary(a.value * b),
        lambda a, b: Imaginary(a * b.value),
        lambda a, b: -(a.value * b.value),
        _complex_mul),
    truediv=_table(_real('truediv'),
        lambda a, b: Imaginary(a.value / b) if b else _signed_infinity(a),
        lambda a, b: Imaginary(-(a / b.value)) if b else _signed_infinity(a),
        lambda a, b: a.value / b.value if b else _signed_infinity(a),
        _complex_truediv),
    floordiv=_table(_real('floordiv'), _complex_floordiv, _complex_floordiv, _complex_floordiv, _complex_floordiv),
    mod=_table(_real('mod'), *[_unsupported_op('modulo', Double(0))]*4),
    remainder=_table(_real('remainder'), *[_unsupported_op('remainder', Double(0))]*4),
    pow={
        ('real', 'real'): _real_pow,
        ('imaginary', 'real'): _complex_pow,
        ('complex', 'real'): _complex_pow,
        ('real', 'imaginary'): _unsupported_op('imaginary exponent', Double(1)),
        ('imaginary', 'imaginary'): _unsupported_op('imaginary exponent', Double(1)),
        ('complex', 'imaginary'): _unsupported_op('imaginary exponent', Double(1)),
        ('real', 'complex'): _unsupported_op('complex exponent', Double(1)),
        ('imaginary', 'complex'): _unsupported_op('complex exponent', Double(1)),
        ('complex', 'complex'): _unsupported_op('complex exponent', Double(1)),
    },
)


# vim:sw=4:sts=4:et

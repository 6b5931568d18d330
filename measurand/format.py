'''
Number formatting for quantity output.

:class:`NumberFormatSI` writes numbers the way the SI brochure recommends,
with digits grouped in threes on both sides of the decimal marker when a
group of digits is longer than four:

    >>> from measurand.format import NumberFormatSI
    >>> NumberFormatSI().format(1234567.891)
    '1 234 567.891'
    >>> NumberFormatSI().format(0.00012345)
    '0.000 123 45'
    >>> NumberFormatSI(unicode=True).format(1.5e-12)
    '1.5×10⁻¹²'
'''

import enum
from . import number


class UncertaintyFormat(enum.Enum):
    'Display mode of the uncertainty in :meth:`measurand.quantity.Quantity.output_text`.'

    none = 'none'
    parens = 'parens'
    plus_minus = 'plus_minus'


_SUPERSCRIPTS = str.maketrans('-0123456789', '⁻⁰¹²³⁴⁵⁶⁷⁸⁹')


class NumberFormatSI:
    '''SI style number formatter.

    Args
    ----
    unicode : :class:`bool`
        Use a thin space as group separator, ``×10ⁿ`` for exponents and ``±``
        for uncertainties, rather than plain ASCII.
    '''

    def __init__(self, unicode=False):
        self.unicode = unicode

    @property
    def separator(self):
        return '\u2009' if self.unicode else ' '

    @property
    def plus_minus(self):
        return '±' if self.unicode else '+/-'

    def format(self, value):
        value = number.asnumber(value)
        if isinstance(value, number.Complex):
            sign = '-' if value.imag.isnegative else '+'
            return f'{self.format(value.real)} {sign} {self.format(abs(value.imag))}i'
        if isinstance(value, number.Imaginary):
            return self.format(value.value) + 'i'
        if value.isnan or value.isinfinite:
            return str(value.value)
        if isinstance(value, number.Double):
            s = repr(value.value)
        else:
            s = str(value.value)
        mantissa, e, exponent = s.lower().partition('e')
        sign = '-' if mantissa.startswith('-') else ''
        whole, point, fraction = mantissa.lstrip('-').partition('.')
        text = sign + self._group(whole, reverse=True) + point + self._group(fraction, reverse=False)
        if e:
            exponent = str(int(exponent))
            text += '×10' + exponent.translate(_SUPERSCRIPTS) if self.unicode else 'e' + exponent
        return text

    def _group(self, digits, reverse):
        if len(digits) <= 4:
            return digits
        if reverse:
            head = len(digits) % 3 or 3
            groups = [digits[:head]] + [digits[i:i+3] for i in range(head, len(digits), 3)]
        else:
            groups = [digits[i:i+3] for i in range(0, len(digits), 3)]
        return self.separator.join(groups)


# vim:sw=4:sts=4:et

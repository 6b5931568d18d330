from measurand.testing import TestCase, parametrize
from measurand.number import asnumber, Number, Integer, Double, Precise, Imaginary, Complex, UnsupportedOperation
from measurand import config, warnings
import decimal
import fractions
import math
import numpy


class Coercion(TestCase):

    def test_int(self):
        self.assertEqual(repr(asnumber(3)), 'Integer(3)')
        self.assertEqual(repr(asnumber(True)), 'Integer(1)')
        self.assertEqual(repr(asnumber(numpy.int64(7))), 'Integer(7)')

    def test_float(self):
        self.assertEqual(repr(asnumber(2.5)), 'Double(2.5)')
        self.assertEqual(repr(asnumber(numpy.float64(.5))), 'Double(0.5)')

    def test_decimal(self):
        self.assertIsInstance(asnumber(decimal.Decimal('1.5')), Precise)

    def test_fraction(self):
        self.assertEqual(repr(asnumber(fractions.Fraction(4, 2))), 'Integer(2)')
        self.assertEqual(repr(asnumber(fractions.Fraction(1, 4))), 'Double(0.25)')

    def test_complex(self):
        self.assertEqual(asnumber(1+2j), Complex(1, 2))

    def test_invalid(self):
        with self.assertRaises(TypeError):
            asnumber('1')
        with self.assertRaises(TypeError):
            asnumber(None)

    def test_identity(self):
        n = Double(1.)
        self.assertIs(asnumber(n), n)


class Immutable(TestCase):

    def test_setattr(self):
        for n in Integer(1), Double(1.), Precise(1), Imaginary(1), Complex(1, 2):
            with self.subTest(n=n), self.assertRaises(AttributeError):
                n.value = 2

    def test_operations_return_new_instances(self):
        a = Integer(2)
        b = a + 0
        self.assertEqual(a, b)
        self.assertIsNot(a, b)


class Promotion(TestCase):

    def assertNumber(self, actual, desired):
        self.assertIs(type(actual), type(desired))
        self.assertEqual(actual, desired)

    def test_real_axis(self):
        self.assertNumber(Integer(2) + Integer(3), Integer(5))
        self.assertNumber(Integer(2) + Double(.5), Double(2.5))
        self.assertNumber(Double(.5) + Integer(2), Double(2.5))
        self.assertNumber(Integer(2) + Precise('0.5'), Precise('2.5'))
        self.assertNumber(Double(.5) * Precise(2), Precise(1))
        self.assertNumber(Precise(2) - Double(.5), Precise('1.5'))

    def test_python_operands(self):
        self.assertNumber(Integer(2) * 3, Integer(6))
        self.assertNumber(3 * Integer(2), Integer(6))
        self.assertNumber(1 - Double(.25), Double(.75))
        self.assertNumber(Integer(1) + .5, Double(1.5))

    def test_imaginary(self):
        self.assertNumber(Integer(3) * Imaginary(2), Imaginary(6))
        self.assertNumber(Imaginary(2) * Integer(3), Imaginary(6))
        self.assertNumber(Imaginary(2) * Imaginary(3), Integer(-6))
        self.assertNumber(Imaginary(2) + Imaginary(3), Imaginary(5))
        self.assertNumber(Integer(1) + Imaginary(2), Complex(1, 2))
        self.assertNumber(Imaginary(2) - Integer(1), Complex(-1, 2))
        self.assertNumber(Imaginary(6) / Imaginary(3), Integer(2))
        self.assertNumber(Integer(6) / Imaginary(3), Imaginary(-2))

    def test_complex(self):
        self.assertNumber(Complex(1, 2) + Complex(3, 4), Complex(4, 6))
        self.assertNumber(Complex(1, 2) - Integer(1), Complex(0, 2))
        self.assertNumber(Complex(1, 2) * Complex(3, 4), Complex(-5, 10))
        self.assertNumber(Complex(1, 2) * Imaginary(1), Complex(-2, 1))
        self.assertNumber(Complex(-5, 10) / Complex(3, 4), Complex(1, 2))

    def test_unknown_operand(self):
        with self.assertRaises(TypeError):
            Integer(1) + 'a'
        with self.assertRaises(TypeError):
            Integer(1) + None


class IntegerArithmetic(TestCase):

    def test_exact_division(self):
        self.assertEqual(repr(Integer(6) / 3), 'Integer(2)')
        self.assertEqual(repr(Integer(1) / 4), 'Double(0.25)')

    def test_truncating_division(self):
        self.assertEqual(Integer(7) // 2, 3)
        self.assertEqual(Integer(-7) // 2, -3)
        self.assertEqual(Integer(7) // -2, -3)

    def test_modulo(self):
        self.assertEqual(Integer(7) % 3, 1)
        self.assertEqual(Integer(-7) % 3, 2)
        self.assertEqual(Integer(-7) % -3, 2)

    def test_remainder(self):
        self.assertEqual(Integer(7).remainder(3), 1)
        self.assertEqual(Integer(-7).remainder(3), -1)

    def test_division_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            Integer(1) // 0
        with self.assertRaises(ZeroDivisionError):
            Integer(1) % 0
        self.assertEqual(Integer(1) / 0, Double(math.inf))

    def test_power(self):
        self.assertEqual(repr(Integer(2) ** 10), 'Integer(1024)')
        self.assertEqual(repr(Integer(2) ** -2), 'Double(0.25)')
        self.assertEqual(repr(Integer(-1) ** -3), 'Integer(-1)')
        self.assertEqual(Integer(0) ** -1, Double(math.inf))

    def test_arbitrary_range(self):
        self.assertEqual(Integer(2) ** 100, 2 ** 100)

    def test_sqrt(self):
        self.assertEqual(repr(Integer(16).sqrt()), 'Integer(4)')
        self.assertEqual(repr(Integer(2).sqrt()), 'Double({!r})'.format(math.sqrt(2)))
        self.assertEqual(repr(Integer(-4).sqrt()), 'Imaginary(Integer(2))')


class DoubleArithmetic(TestCase):

    def test_division_by_zero(self):
        self.assertEqual(Double(1) / 0, Double(math.inf))
        self.assertEqual(Double(-1) / 0, Double(-math.inf))
        self.assertTrue((Double(0) / 0).isnan)

    def test_special_values(self):
        nan = Double(math.nan)
        self.assertTrue(nan.isnan)
        self.assertFalse(nan.isfinite)
        self.assertNotEqual(nan, nan)
        self.assertTrue(Double(math.inf).isinfinite)
        self.assertTrue(Double(-math.inf).isnegative)
        self.assertTrue(Double(-0.).isnegative)

    def test_truncating_division(self):
        self.assertEqual(Double(7.5) // 2, Double(3.))
        self.assertEqual(Double(-7.5) // 2, Double(-3.))

    def test_modulo(self):
        self.assertEqual(Double(-7.5) % 2, Double(.5))
        self.assertEqual(Double(-7.5).remainder(2), Double(-1.5))

    def test_power(self):
        self.assertAlmostEqual(float(Double(2.) ** .5), math.sqrt(2))
        self.assertEqual(Double(0.) ** -1, Double(math.inf))

    def test_negative_base_fractional_exponent(self):
        z = Double(-8.) ** (1/3)
        self.assertIsInstance(z, Complex)
        self.assertAlmostEqual(float(z.real), 1.)
        self.assertAlmostEqual(float(z.imag), math.sqrt(3))


class PreciseArithmetic(TestCase):

    def test_float_conversion(self):
        self.assertEqual(Precise(.1), Precise('0.1'))

    def test_exactness(self):
        self.assertEqual(Precise('0.1') + Precise('0.2'), Precise('0.3'))
        self.assertNotEqual(Double(.1) + Double(.2), Double(.3))

    def test_sigdigits(self):
        self.assertEqual(repr(Precise(1, 5) / 3), "Precise(Decimal('0.33333'))")
        self.assertEqual((Precise(1, 5) + Precise(1, 8)).sigdigits, 8)
        self.assertEqual((Precise(1, 5) + 1).sigdigits, 5)

    def test_default_sigdigits(self):
        self.assertEqual(Precise(1).sigdigits, 50)
        with config(precision=10):
            self.assertEqual(Precise(1).sigdigits, 10)

    def test_division_by_zero(self):
        self.assertTrue((Precise(1) / 0).isinfinite)
        self.assertTrue((Precise(0) / 0).isnan)

    def test_truncating_division(self):
        self.assertEqual(Precise('-7.5') // 2, Precise(-3))
        self.assertEqual(Precise('-7.5') % 2, Precise('0.5'))
        self.assertEqual(Precise('-7.5').remainder(2), Precise('-1.5'))

    def test_sqrt(self):
        self.assertEqual(Precise(2, 10).sqrt(), Precise('1.414213562'))
        self.assertEqual(Precise(-4).sqrt(), Imaginary(Precise(2)))

    def test_rounding(self):
        self.assertEqual(Precise('2.5').round(), 3)
        self.assertEqual(Precise('-2.5').round(), -3)
        self.assertEqual(Precise('2.5').ceil(), 3)
        self.assertEqual(Precise('-2.5').floor(), -3)

    def test_round_beyond_default_context(self):
        n = Precise('123456789012345678901234567890.5').round()
        self.assertEqual(repr(n), 'Integer(123456789012345678901234567891)')
        self.assertEqual(Precise('-1e40').round(), -10**40)


class ComplexArithmetic(TestCase):

    def test_reciprocal(self):
        self.assertEqual(Complex(3, 4).reciprocal(), Complex(.12, -.16))

    def test_modulus(self):
        z = Complex(3, 4)
        self.assertEqual(repr(abs(z)), 'Integer(5)')
        self.assertEqual(z.absolute_square, 25)
        self.assertAlmostEqual(float(z.argument), math.atan2(4, 3))
        self.assertEqual(z.conjugate, Complex(3, -4))
        self.assertEqual(z.imaginary, Imaginary(4))

    def test_division_by_zero(self):
        self.assertEqual(Complex(1, -1) / Complex(0, 0), Complex(math.inf, -math.inf))
        self.assertEqual(Complex(-1, 1) / 0, Complex(-math.inf, math.inf))
        self.assertEqual(Complex(0, 0).reciprocal(), Complex(math.inf, math.inf))

    def test_integer_power(self):
        self.assertEqual(repr(Complex(1, 1) ** 2), 'Complex(Integer(0), Integer(2))')
        self.assertEqual(Complex(0, 1) ** 4, Complex(1, 0))
        self.assertEqual(Complex(0, 2) ** -1, Complex(0, -.5))
        self.assertEqual(Complex(3, 4) ** 0, 1)

    def test_real_power(self):
        z = Complex(0, 4) ** .5
        self.assertAlmostEqual(float(z.real), math.sqrt(2))
        self.assertAlmostEqual(float(z.imag), math.sqrt(2))

    def test_imaginary_power(self):
        self.assertEqual(Imaginary(2) ** 2, Complex(-4, 0))

    def test_truncating_division(self):
        self.assertEqual(Complex(7, -7) // 2, Complex(3, -3))

    def test_unsupported(self):
        with self.assertRaises(UnsupportedOperation):
            Complex(1, 1) % 2
        with self.assertRaises(UnsupportedOperation):
            Integer(2) ** Complex(1, 1)
        with self.assertRaises(UnsupportedOperation):
            Integer(2) ** Imaginary(1)

    def test_rounding(self):
        z = Complex(1.5, -2.5)
        self.assertEqual(z.ceil(), Complex(2, -2))
        self.assertEqual(z.floor(), Complex(1, -3))
        self.assertEqual(z.truncate(), Complex(1, -2))
        self.assertEqual(z.round(), Complex(2, -3))

    def test_str(self):
        self.assertEqual(str(Complex(1, -2)), '1 - 2i')
        self.assertEqual(str(Complex(1.5, 2)), '1.5 + 2i')
        self.assertEqual(str(Imaginary(3)), '3i')


class Comparison(TestCase):

    def test_cross_variant_equality(self):
        self.assertEqual(Integer(2), Double(2.))
        self.assertEqual(Double(2.5), Precise('2.5'))
        self.assertEqual(Complex(2, 0), Integer(2))
        self.assertEqual(Imaginary(0), 0)
        self.assertNotEqual(Complex(2, 1), Integer(2))

    def test_double_meets_precise(self):
        self.assertEqual(Precise('0.1') - Double(.1), 0)
        self.assertEqual(Precise('0.1'), Double(.1))
        self.assertEqual(Double(.1), Precise('0.1'))
        self.assertFalse(Double(.1) > Precise('0.1'))
        self.assertFalse(Double(.1) < Precise('0.1'))
        self.assertEqual(Double(.1).compare(Precise('0.1')), 0)
        self.assertLess(Double(.1), Precise('0.10000000000000001'))
        self.assertEqual(Complex(Double(.1), Double(.2)), Complex(Precise('0.1'), Precise('0.2')))
        self.assertEqual(hash(Precise('0.1')), hash(Double(.1)))
        self.assertEqual(hash(Precise('0.1')), hash(.1))
        self.assertEqual(len({Precise('0.1'), Double(.1)}), 1)
        self.assertEqual(Precise(math.inf), Double(math.inf))

    def test_hash(self):
        self.assertEqual(hash(Integer(2)), hash(Double(2.)))
        self.assertEqual(hash(Integer(2)), hash(2))
        self.assertEqual(hash(Complex(2, 0)), hash(2))
        self.assertEqual(hash(Complex(1, 2)), hash(1+2j))
        self.assertEqual(len({Integer(1), Double(1.), Precise(1)}), 1)

    def test_ordering(self):
        self.assertLess(Integer(1), Double(1.5))
        self.assertGreater(Precise('1.5'), 1)
        self.assertLessEqual(Complex(1, 100), Integer(1))
        self.assertFalse(Double(math.nan) < 1)
        self.assertFalse(Double(math.nan) > 1)

    def test_compare(self):
        self.assertEqual(Integer(1).compare(2), -1)
        self.assertEqual(Double(2.).compare(Integer(2)), 0)
        self.assertEqual(Precise(3).compare(2.5), 1)
        self.assertEqual(Double(math.nan).compare(math.inf), 1)
        self.assertEqual(Integer(1).compare(Double(math.nan)), -1)

    def test_clamp(self):
        self.assertEqual(Integer(5).clamp(0, 3), 3)
        self.assertEqual(Double(-1.).clamp(0, 3), 0)
        self.assertEqual(Double(1.5).clamp(0, 3), 1.5)
        with self.assertRaises(ValueError):
            Integer(1).clamp(3, 0)


class Conversion(TestCase):

    def test_float(self):
        self.assertEqual(float(Integer(2)), 2.)
        self.assertEqual(float(Precise('2.5')), 2.5)
        self.assertEqual(float(Complex(1.5, 2)), 1.5)

    def test_int(self):
        self.assertEqual(int(Double(-2.7)), -2)
        self.assertEqual(int(Precise('2.7')), 2)
        with self.assertRaises(ValueError):
            int(Double(math.nan))

    def test_complex(self):
        self.assertEqual(complex(Complex(1, 2)), 1+2j)
        self.assertEqual(complex(Imaginary(2)), 2j)

    def test_rounding(self):
        self.assertEqual(repr(Double(2.5).round()), 'Integer(3)')
        self.assertEqual(repr(Double(-2.5).round()), 'Integer(-3)')
        self.assertEqual(repr(Double(.49999999999999994).round()), 'Integer(0)')
        self.assertEqual(repr(Double(2.5).ceil()), 'Integer(3)')
        self.assertEqual(repr(Double(-2.5).floor()), 'Integer(-3)')
        self.assertEqual(repr(Double(-2.5).truncate()), 'Integer(-2)')
        self.assertEqual(Double(1e300).round(), int(1e300))
        self.assertEqual(Double(-1e30).round().value, int(-1e30))
        self.assertEqual(round(Double(2.5)), 3)
        self.assertEqual(math.floor(Double(2.5)), 2)
        with self.assertRaises(ValueError):
            Double(math.inf).round()

    def test_sign(self):
        self.assertEqual(repr(Integer(-5).sign), 'Integer(-1)')
        self.assertEqual(repr(Double(0.).sign), 'Integer(0)')
        self.assertEqual(repr(Double(2.5).sign), 'Double(1.0)')
        self.assertTrue(Double(math.nan).sign.isnan)

    def test_predicates(self):
        self.assertTrue(Double(2.).isinteger)
        self.assertFalse(Double(2.5).isinteger)
        self.assertFalse(Double(math.inf).isinteger)
        self.assertTrue(Precise('2.000').isinteger)
        self.assertTrue(Complex(2, 0).isinteger)
        self.assertFalse(Imaginary(2).isinteger)


class Json(TestCase):

    def test_keys(self):
        self.assertEqual(Integer(3).to_json(), {'i': 3})
        self.assertEqual(Double(2.5).to_json(), {'d': 2.5})
        self.assertEqual(Precise('1.5', 20).to_json(), {'pd': '1.5', 'sig': 20})
        self.assertEqual(Imaginary(2).to_json(), {'imag': {'i': 2}})
        self.assertEqual(Complex(1, 2.5).to_json(), {'real': {'i': 1}, 'imag': {'d': 2.5}})

    def test_from_json(self):
        for n in Integer(3), Double(2.5), Precise('1.5', 20), Imaginary(2), Complex(1, 2.5):
            with self.subTest(n=n):
                m = Number.from_json(n.to_json())
                self.assertIs(type(m), type(n))
                self.assertEqual(m, n)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Number.from_json({'x': 1})


class Lenient(TestCase):

    def test_none_operand(self):
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(Integer(2) + None, 2)
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(Double(2.) * None, 2)

    def test_none_reflected_operand(self):
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(repr(None - Integer(2)), 'Integer(-2)')
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(None / Double(4.), .25)
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(None + Integer(2), 2)
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(None * Integer(2), 2)

    def test_compare_none(self):
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(Integer(2).compare(None), 1)

    def test_unsupported_defaults(self):
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(repr(Complex(1, 1) % 2), 'Double(0.0)')
        with config(lenient=True), self.assertWarns(warnings.LegacyBehaviourWarning):
            self.assertEqual(repr(Integer(2) ** Imaginary(1)), 'Double(1.0)')


@parametrize
class real_variants(TestCase):

    def test_sum(self):
        self.assertAlmostEqual(float(self.T(1.5) + self.T(2.25)), 3.75)

    def test_product(self):
        self.assertAlmostEqual(float(self.T(1.5) * self.T(4)), 6.)

    def test_quotient(self):
        self.assertAlmostEqual(float(self.T(1) / self.T(8)), .125)

    def test_power(self):
        self.assertAlmostEqual(float(self.T(9) ** .5), 3.)

    def test_sqrt(self):
        self.assertAlmostEqual(float(self.T(2).sqrt()), math.sqrt(2))

    def test_negative_sqrt(self):
        root = self.T(-9).sqrt()
        self.assertIsInstance(root, Imaginary)
        self.assertAlmostEqual(float(root.value), 3.)

real_variants('double', T=Double)
real_variants('precise', T=Precise)

'''
The SI module defines the quantity types of the International System of
Units together with their common units. Importing it registers the types, so
that arithmetic on quantities yields instances of them:

    >>> from measurand import SI
    >>> d = SI.Length(1000, SI.millimeters)
    >>> d.value_si
    Double(1.0)
    >>> type(d / SI.Time(2))
    <class 'measurand.SI.Speed'>
    >>> SI.Temperature(0, SI.degrees_celsius).value_si
    Double(273.15)

Further types and units are defined in the same manner, by subclassing
:class:`measurand.quantity.Quantity` with the dimensions they represent and
instantiating :class:`measurand.units.Units`:

    >>> from measurand.dimensions import Dimensions
    >>> from measurand.quantity import Quantity
    >>> from measurand.units import Units
    >>> grays = Units('grays', 1, Dimensions(Length=2, Time=-2), abbrev1='Gy', singular='gray', metric_base=True)
    >>> class AbsorbedDose(Quantity, dimensions=grays.dimensions, si_units=grays):
    ...     pass
'''

import math
from .dimensions import Dimensions
from .quantity import Quantity, MiscQuantity, Scalar, one
from .units import Units, product, quotient, power


## SI BASE QUANTITIES

meters = Units('meters', 1, Dimensions(Length=1), abbrev1='m', singular='meter', metric_base=True)
grams = Units('grams', 0.001, Dimensions(Mass=1), abbrev1='g', singular='gram', metric_base=True)
kilograms = grams.kilo()
seconds = Units('seconds', 1, Dimensions(Time=1), abbrev1='s', abbrev2='sec', singular='second', metric_base=True)
amperes = Units('amperes', 1, Dimensions(Current=1), abbrev1='A', abbrev2='amp', singular='ampere', metric_base=True)
kelvins = Units('kelvins', 1, Dimensions(Temperature=1), abbrev1='K', singular='kelvin', metric_base=True)
moles = Units('moles', 1, Dimensions(Amount=1), abbrev1='mol', singular='mole', metric_base=True)
candelas = Units('candelas', 1, Dimensions(Intensity=1), abbrev1='cd', singular='candela', metric_base=True)
radians = Units('radians', 1, Dimensions(Angle=1), abbrev1='rad', singular='radian', metric_base=True)
steradians = Units('steradians', 1, Dimensions(SolidAngle=1), abbrev1='sr', singular='steradian', metric_base=True)


class Length(Quantity, dimensions=meters.dimensions, si_units=meters):
    'The extent of something along its greatest dimension.'


class Mass(Quantity, dimensions=grams.dimensions, si_units=kilograms):
    pass


class Time(Quantity, dimensions=seconds.dimensions, si_units=seconds):
    pass


class Current(Quantity, dimensions=amperes.dimensions, si_units=amperes):
    'Electric current, the flow of electric charge.'


class Temperature(Quantity, dimensions=kelvins.dimensions, si_units=kelvins):
    'Thermodynamic temperature.'


class AmountOfSubstance(Quantity, dimensions=moles.dimensions, si_units=moles):
    pass


class LuminousIntensity(Quantity, dimensions=candelas.dimensions, si_units=candelas):
    pass


class Angle(Quantity, dimensions=radians.dimensions, si_units=radians):
    'Plane angle; dimensionless in strict SI, see :attr:`Quantity.isscalarsi`.'


class SolidAngle(Quantity, dimensions=steradians.dimensions, si_units=steradians):
    pass


## SI DERIVED QUANTITIES

square_meters = Units('square meters', 1, Dimensions(Length=2), abbrev1='m²', abbrev2='m2', singular='square meter')
cubic_meters = Units('cubic meters', 1, Dimensions(Length=3), abbrev1='m³', abbrev2='m3', singular='cubic meter')
meters_per_second = quotient(meters, seconds)
meters_per_second_squared = quotient(meters, power(seconds, 2))
newtons = Units('newtons', 1, Dimensions(Mass=1, Length=1, Time=-2), abbrev1='N', singular='newton', metric_base=True)
joules = Units('joules', 1, Dimensions(Mass=1, Length=2, Time=-2), abbrev1='J', singular='joule', metric_base=True)
watts = Units('watts', 1, Dimensions(Mass=1, Length=2, Time=-3), abbrev1='W', singular='watt', metric_base=True)
pascals = Units('pascals', 1, Dimensions(Mass=1, Length=-1, Time=-2), abbrev1='Pa', singular='pascal', metric_base=True)
hertz = Units('hertz', 1, Dimensions(Time=-1), abbrev1='Hz', singular='hertz', metric_base=True)
coulombs = Units('coulombs', 1, Dimensions(Current=1, Time=1), abbrev1='C', singular='coulomb', metric_base=True)
volts = Units('volts', 1, Dimensions(Mass=1, Length=2, Time=-3, Current=-1), abbrev1='V', singular='volt', metric_base=True)
volts_per_meter = quotient(volts, meters)
amperes_per_meter = quotient(amperes, meters)
moles_per_cubic_meter = quotient(moles, cubic_meters)
kilograms_per_second = quotient(kilograms, seconds)


class Area(Quantity, dimensions=square_meters.dimensions, si_units=square_meters):
    pass


class Volume(Quantity, dimensions=cubic_meters.dimensions, si_units=cubic_meters):
    pass


class Speed(Quantity, dimensions=meters_per_second.dimensions, si_units=meters_per_second):
    'Distance travelled per unit of time.'


class Acceleration(Quantity, dimensions=meters_per_second_squared.dimensions, si_units=meters_per_second_squared):
    'The rate of change of speed.'


class Force(Quantity, dimensions=newtons.dimensions, si_units=newtons):
    pass


class Energy(Quantity, dimensions=joules.dimensions, si_units=joules):
    pass


class Power(Quantity, dimensions=watts.dimensions, si_units=watts):
    pass


class Pressure(Quantity, dimensions=pascals.dimensions, si_units=pascals):
    pass


class Frequency(Quantity, dimensions=hertz.dimensions, si_units=hertz):
    pass


class Charge(Quantity, dimensions=coulombs.dimensions, si_units=coulombs):
    pass


class ElectricPotential(Quantity, dimensions=volts.dimensions, si_units=volts):
    pass


class ElectricFieldStrength(Quantity, dimensions=volts_per_meter.dimensions, si_units=volts_per_meter):
    'Electric force per unit of charge.'


class MagneticFieldStrength(Quantity, dimensions=amperes_per_meter.dimensions, si_units=amperes_per_meter):
    pass


class Concentration(Quantity, dimensions=moles_per_cubic_meter.dimensions, si_units=moles_per_cubic_meter):
    'Amount of substance per unit of volume.'


class MassFlowRate(Quantity, dimensions=kilograms_per_second.dimensions, si_units=kilograms_per_second):
    pass


## SI UNITS

kilometers = meters.kilo()
centimeters = meters.centi()
millimeters = meters.milli()
micrometers = meters.micro()
nanometers = meters.nano()
angstroms = Units('angstroms', 1e-10, meters.dimensions, abbrev1='Å', singular='angstrom')
inches = Units('inches', 0.0254, meters.dimensions, abbrev1='in', singular='inch')
feet = Units('feet', 0.3048, meters.dimensions, abbrev1='ft', singular='foot')
miles = Units('miles', 1609.344, meters.dimensions, abbrev1='mi', singular='mile')
nautical_miles = Units('nautical miles', 1852, meters.dimensions, abbrev1='NM', abbrev2='nmi', singular='nautical mile')
astronomical_units = Units('astronomical units', 1.495978707e11, meters.dimensions, abbrev1='au', singular='astronomical unit')

milligrams = grams.milli()
micrograms = grams.micro()
metric_tons = Units('metric tons', 1000, grams.dimensions, abbrev1='t', singular='metric ton', metric_base=True)
pounds = Units('pounds', 0.45359237, grams.dimensions, abbrev1='lb', singular='pound')

milliseconds = seconds.milli()
microseconds = seconds.micro()
nanoseconds = seconds.nano()
minutes = Units('minutes', 60, seconds.dimensions, abbrev1='min', singular='minute')
hours = Units('hours', 3600, seconds.dimensions, abbrev1='h', abbrev2='hr', singular='hour')
days = Units('days', 86400, seconds.dimensions, abbrev1='d', singular='day')

milliamperes = amperes.milli()

degrees_celsius = Units('degrees Celsius', 1, kelvins.dimensions, abbrev1='°C', abbrev2='deg C', singular='degree Celsius', offset=273.15)
degrees_fahrenheit = Units('degrees Fahrenheit', 5 / 9, kelvins.dimensions, abbrev1='°F', abbrev2='deg F', singular='degree Fahrenheit', offset=459.67)

degrees = Units('degrees', math.pi / 180, radians.dimensions, abbrev1='°', abbrev2='deg', singular='degree')

hectares = Units('hectares', 10000, square_meters.dimensions, abbrev1='ha', singular='hectare')
liters = Units('liters', 0.001, cubic_meters.dimensions, abbrev1='L', singular='liter', metric_base=True)
milliliters = liters.milli()

kilometers_per_hour = quotient(kilometers, hours)
knots = Units('knots', 1852 / 3600, meters_per_second.dimensions, abbrev1='kn', singular='knot')

kilonewtons = newtons.kilo()
kilojoules = joules.kilo()
calories = Units('calories', 4.184, joules.dimensions, abbrev1='cal', singular='calorie', metric_base=True)
electronvolts = Units('electronvolts', 1.602176634e-19, joules.dimensions, abbrev1='eV', singular='electronvolt', metric_base=True)
kilowatts = watts.kilo()
megawatts = watts.mega()
kilopascals = pascals.kilo()
bars = Units('bars', 100000, pascals.dimensions, abbrev1='bar', singular='bar', metric_base=True)
atmospheres = Units('atmospheres', 101325, pascals.dimensions, abbrev1='atm', singular='atmosphere')
kilohertz = hertz.kilo()
megahertz = hertz.mega()
millivolts = volts.milli()
kilovolts = volts.kilo()
newton_meters = product(newtons, meters)

percent = Units('percent', 0.01, one.dimensions, abbrev1='%', singular='percent')


# vim:sw=4:sts=4:et

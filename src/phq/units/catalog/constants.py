# phq.units.catalog.constants
#
# Exact definitions of the non-SI units the catalog is built from.

from phq.core.conversion import Constant

# Length
MILE = Constant("1609.344")
YARD = Constant("0.9144")
FOOT = Constant("0.3048")
INCH = Constant("0.0254")
MILLIINCH = Constant("0.0000254")
MICROINCH = Constant("0.0000000254")

# Mass and force
POUND_MASS = Constant("0.45359237")
STANDARD_GRAVITY = Constant("9.80665")
POUND_FORCE = POUND_MASS * STANDARD_GRAVITY
SLUG = POUND_FORCE / FOOT
SLINCH = POUND_FORCE / INCH

# Time
MINUTE = Constant("60")
HOUR = Constant("3600")

# Angle
PI = Constant("3.14159265358979323846264338327950288")
DEGREE = PI / 180
ARCMINUTE = PI / 10800
ARCSECOND = PI / 648000
REVOLUTION = PI * 2

# Temperature: one kelvin is 1.8 rankine.
RANKINE = Constant("1") / Constant("1.8")
KELVIN_PER_RANKINE = Constant("1.8")
CELSIUS_OFFSET = Constant("273.15")
FAHRENHEIT_OFFSET = Constant("459.67")

# Pressure
BAR = Constant("100000")
ATMOSPHERE = Constant("101325")

# Electricity and substance
ELEMENTARY_CHARGE = Constant("1.602176634E-19")
AVOGADRO = Constant("6.02214076E23")

# Area and volume
HECTARE = Constant("10000")
ACRE = Constant("4046.8564224")
LITRE = Constant("0.001")
MILLILITRE = Constant("0.000001")

# Memory, binary prefixes
BIT = Constant("0.125")
KIBI = Constant("1024")

# Decimal prefixes
TERA = Constant("1E12")
GIGA = Constant("1E9")
MEGA = Constant("1E6")
KILO = Constant("1000")
MILLI = Constant("0.001")
MICRO = Constant("0.000001")
NANO = Constant("0.000000001")

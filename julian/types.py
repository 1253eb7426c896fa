"""
# The point in time type positioned on the Julian Date axis.

# A &DateTime holds a Julian Date, days since midnight local time of
# January 1st, 4713 BCE, and a fixed UTC offset. An &int Julian Date makes a
# date-only value; any other real, a &fractions.Fraction by default, makes a
# date-time whose fractional part is the time of day.

#!/pl/python
	d = DateTime.of_date(2021, 1, 1)
	assert d.jd == 2459216
	assert (d + 1).civil() == (2021, 1, 2)

	morning = DateTime.of_datetime(2021, 1, 1, 4, 0, 0, offset=4)
	midnight = DateTime.of_datetime(2021, 1, 1, 0, 0, 0)
	assert morning - midnight == 0
	assert morning != midnight

# [ Elements ]
# /offset_units/
	# Convert an offset in hours into quarter hour units.
# /difference/
	# Days between two &DateTime instances.
"""
import dataclasses
import fractions
import math
import numbers

from . import constants
from . import core
from . import calendar
from . import earth
from . import gregorian
from . import week
from . import format

def offset_units(hours, limit=constants.offset_limit, per_hour=constants.offset_units_in_hour):
	"""
	# Convert the offset &hours into the stored number of quarter hours.

	# [ Exceptions ]
	# /&core.InvalidOffset/
		# The offset exceeds twenty-four hours in either direction.
	"""
	units = round(hours * per_hour)
	if abs(units) > limit:
		raise core.InvalidOffset(hours)
	return units

def difference(former, latter,
		Integral=numbers.Integral,
		Fraction=fractions.Fraction,
		per_day=constants.offset_units_in_day,
	):
	"""
	# The days from &latter to &former.

	# Date-only operands are subtracted directly and their offsets ignored.
	# Otherwise, the offset difference is removed so that the result measures
	# the distance between the instants.
	"""
	delta = former.jd - latter.jd
	if isinstance(former.jd, Integral) and isinstance(latter.jd, Integral):
		return delta
	return delta - Fraction(former.offset - latter.offset, per_day)

@dataclasses.dataclass(slots=True, eq=True, frozen=True, repr=False)
class DateTime(object):
	"""
	# Immutable point in time with a fixed UTC offset.

	# Equality and hashing use the exact `(jd, offset)` pair while the ordering
	# operators use &difference. Two values naming the same instant with
	# different offsets are neither less nor greater than each other, yet they
	# are not equal.

	# [ Elements ]
	# /jd/
		# The Julian Date at local time.
	# /offset/
		# The UTC offset in quarter hours. Only consulted by &difference.
	"""

	jd: numbers.Real
	offset: int = 0

	@classmethod
	def of_date(Class, year, month, day):
		"""
		# Construct the date-only value of the civil date.
		"""
		return Class(calendar.validate(year, month, day), 0)

	@classmethod
	def of_datetime(Class, year, month, day, hour, minute, second, subsecond=0, offset=0,
			Fraction=fractions.Fraction,
		):
		"""
		# Construct the date-time value of the civil fields.

		# [ Parameters ]
		# /subsecond/
			# Fraction of a second added to &second.
		# /offset/
			# UTC offset in hours; rounded to the nearest quarter hour.
		"""
		jdn = calendar.validate(year, month, day)
		tod = earth.fraction_from_timeofday(hour, minute, second)
		return Class(jdn + tod + (Fraction(subsecond) / earth.seconds_in_day), offset_units(offset))

	@classmethod
	def of_unix(Class, seconds, offset=0, Fraction=fractions.Fraction):
		"""
		# Construct the local date-time of the Unix timestamp &seconds.
		"""
		units = offset_units(offset)
		jd = constants.unix_epoch + (Fraction(seconds) / earth.seconds_in_day)
		return Class(jd + Fraction(units, constants.offset_units_in_day), units)

	@classmethod
	def of_ajd(Class, ajd, offset=0, Fraction=fractions.Fraction):
		"""
		# Construct the local date-time of the astronomical Julian Date &ajd.
		"""
		units = offset_units(offset)
		return Class(ajd + constants.astronomical_delta + Fraction(units, constants.offset_units_in_day), units)

	@property
	def date_only(self) -> bool:
		"""
		# Whether the Julian Date is integral and carries no time of day.
		"""
		return isinstance(self.jd, numbers.Integral)

	@property
	def jdn(self) -> int:
		"""
		# The Julian Day Number of the local date.
		"""
		return math.floor(self.jd)

	@property
	def offset_hours(self) -> fractions.Fraction:
		return fractions.Fraction(self.offset, constants.offset_units_in_hour)

	def civil(self):
		"""
		# The civil fields of the value.

		# Date-only values produce `(year, month, day)`; date-times produce
		# `(year, month, day, hour, minute, second, subsecond)`.
		"""
		if self.date_only:
			return calendar.date_from_jdn(self.jd)

		jdn = self.jdn
		return calendar.date_from_jdn(jdn) + earth.timeofday_from_fraction(self.jd - jdn)

	def timeofday(self):
		if self.date_only:
			return (0, 0, 0, 0)
		return self.civil()[3:]

	@property
	def year(self) -> int:
		return self.civil()[0]

	@property
	def month(self) -> int:
		return self.civil()[1]

	@property
	def day(self) -> int:
		return self.civil()[2]

	@property
	def hour(self) -> int:
		return self.timeofday()[0]

	@property
	def minute(self) -> int:
		return self.timeofday()[1]

	@property
	def second(self) -> int:
		return self.timeofday()[2]

	@property
	def subsecond(self):
		return self.timeofday()[3]

	@property
	def weekday(self) -> int:
		"""
		# Day of the week; 1 is Sunday and 7 is Saturday.
		"""
		return week.day_of_week(self.jd)

	@property
	def leap_year(self) -> bool:
		"""
		# Whether the year of the value is a leap year in the calendar in force.
		"""
		y = self.year
		if calendar.is_julian(self.jdn):
			return calendar.julian_year_is_leap(y)
		return gregorian.year_is_leap(y)

	@property
	def day_of_year(self) -> int:
		"""
		# The one-based ordinal of the day within its year.
		"""
		jdn = self.jdn
		y, m, d = calendar.date_from_jdn(jdn)
		if calendar.is_julian(jdn):
			leap = calendar.julian_year_is_leap(y)
		else:
			leap = gregorian.year_is_leap(y)
		return gregorian.day_of_year(m, d, leap)

	@property
	def ajd(self):
		"""
		# The astronomical Julian Date; days since noon UTC, January 1st, 4713 BCE.
		"""
		shift = fractions.Fraction(self.offset, constants.offset_units_in_day)
		return self.jd - shift - constants.astronomical_delta

	@property
	def unix(self):
		"""
		# Seconds since 1970-01-01T00:00:00Z.
		"""
		shift = fractions.Fraction(self.offset, constants.offset_units_in_day)
		return (self.jd - shift - constants.unix_epoch) * earth.seconds_in_day

	def date(self):
		"""
		# The date-only value of the local date.
		"""
		return self.__class__(self.jdn, 0)

	def __add__(self, days):
		if isinstance(days, numbers.Real):
			return self.__class__(self.jd + days, self.offset)
		return NotImplemented

	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, DateTime):
			return difference(self, operand)
		if isinstance(operand, numbers.Real):
			return self.__class__(self.jd - operand, self.offset)
		return NotImplemented

	def __lt__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return difference(self, operand) < 0

	def __le__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return difference(self, operand) <= 0

	def __gt__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return difference(self, operand) > 0

	def __ge__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return difference(self, operand) >= 0

	def __str__(self):
		return format.string(self)

	def __repr__(self):
		return format.representation(self)

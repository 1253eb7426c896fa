"""
# Conversion between civil dates and Julian Day Numbers.

# Civil dates before &constants.reform are interpreted with the Julian calendar
# and dates on or after it with the Gregorian calendar. The same threshold is
# used by both directions of the conversion; changing it in only one of them
# breaks the round trip that &validate depends on.

#!/pl/python
	assert jdn_from_date(2000, 1, 1) == 2451545
	assert date_from_jdn(2451545) == (2000, 1, 1)
	assert jdn_from_date(1582, 10, 15) - jdn_from_date(1582, 10, 4) == 1
"""
import math

from . import constants
from . import core

def is_julian(jdn, threshold=constants.reform):
	"""
	# Whether the day number precedes the Gregorian calendar reform.
	"""
	return jdn < threshold

def julian_year_is_leap(year):
	"""
	# Given a Julian calendar year, determine whether it is a leap year.
	"""
	return year % 4 == 0

def jdn_from_date(year, month, day, floor=math.floor):
	"""
	# Convert a civil date, (year, month, day), into its Julian Day Number.

	# January and February are treated as the thirteenth and fourteenth months
	# of the preceding year so that the leap day falls at the end of the cycle.
	"""
	if month <= 2:
		year -= 1
		month += 12

	century = year // 100
	correction = 2 - century + (century // 4)

	jdn = floor(365.25 * (year + 4716)) + floor(30.6001 * (month + 1)) + day + correction - 1524
	if is_julian(jdn):
		# No Gregorian correction before the reform.
		jdn -= correction

	return jdn

def date_from_jdn(jdn, floor=math.floor):
	"""
	# Convert a Julian Day Number into a civil date of the form (year, month, day).
	"""
	if is_julian(jdn):
		a = jdn
	else:
		x = floor((jdn - 1867216.25) / 36524.25)
		a = jdn + 1 + x - (x // 4)

	b = a + 1524
	c = floor((b - 122.1) / 365.25)
	d = floor(365.25 * c)
	e = floor((b - d) / 30.6001)
	mday = b - d - floor(30.6001 * e)

	if e <= 13:
		return (c - 4716, e - 1, mday)
	else:
		# Thirteenth and fourteenth months are January and February of the next year.
		return (c - 4715, e - 13, mday)

def is_valid_date(year, month, day):
	"""
	# Whether the civil date survives the round trip through its day number.
	"""
	return date_from_jdn(jdn_from_date(year, month, day)) == (year, month, day)

def validate(year, month, day):
	"""
	# Identify the Julian Day Number of the given civil date.

	# [ Exceptions ]
	# /&core.InvalidDate/
		# The fields do not identify a calendar day: month thirteen, February 30th,
		# or one of the days skipped by the reform.
	"""
	jdn = jdn_from_date(year, month, day)
	if date_from_jdn(jdn) != (year, month, day):
		raise core.InvalidDate(year, month, day)
	return jdn

def days_in_month(year, month):
	"""
	# Number of days in the given month of the calendar in force.

	# The reform month, October 1582, has twenty-one days.
	"""
	first = validate(year, month, 1)
	if month == 12:
		return jdn_from_date(year + 1, 1, 1) - first
	return jdn_from_date(year, month + 1, 1) - first

"""
# Primary public module.

# Provides the construction functions, &date, &datetime, and &now, the field
# accessors, and the month and weekday tables.

#!/pl/python
	from julian import library as jdlib

	d = jdlib.date(2021, 3, 1)
	assert jdlib.yday(d) == 60
	assert jdlib.wday(d) == 2 # Monday

	dt = jdlib.datetime(2021, 3, 1, 18, 30, 0, 0, -5)
	assert str(dt) == "1 Mar 2021 18:30:00.00 (-0500)"
	assert (dt + 6*jdlib.hours).civil()[:4] == (2021, 3, 2, 0)
"""
from . import calendar
from . import gregorian
from . import week
from . import format
from . import system
from .core import Error, InvalidDate, InvalidOffset, EnvironmentUnavailable
from .constants import days, hours, minutes, seconds
from .types import DateTime
from .system import now, today, zone, current_time_millis, current_time_micros

__shortname__ = 'jdlib'

MONTHS = gregorian.month_names
SHORT_MONTHS = gregorian.month_abbreviations
DAY_OF_WEEK = week.weekday_names
SHORT_DAY_OF_WEEK = week.weekday_abbreviations

month_name = gregorian.month_name
weekday_name = week.weekday_name
leap_year = gregorian.year_is_leap
iso8601 = format.format_iso8601

def date(year, month, day) -> DateTime:
	"""
	# Construct the date-only value of the civil date.

	# [ Exceptions ]
	# /&InvalidDate/
		# The fields do not identify a calendar day.
	"""
	return DateTime.of_date(year, month, day)

def datetime(year, month, day, hour, minute, second, subsecond=0, offset=None) -> DateTime:
	"""
	# Construct the date-time value of the civil fields.

	# [ Parameters ]
	# /subsecond/
		# Fraction of a second; a &fractions.Fraction or &float in [0, 1).
	# /offset/
		# UTC offset in hours. When &None, the offset of the local &zone is used.

	# [ Exceptions ]
	# /&InvalidDate/
		# The date fields do not identify a calendar day.
	# /&InvalidOffset/
		# The offset exceeds twenty-four hours.
	"""
	if offset is None:
		offset = system.zone().offset
	return DateTime.of_datetime(year, month, day, hour, minute, second, subsecond, offset)

def from_unix(seconds, offset=0) -> DateTime:
	"""
	# Construct the local date-time of the Unix timestamp &seconds.
	"""
	return DateTime.of_unix(seconds, offset)

def from_ajd(ajd, offset=0) -> DateTime:
	"""
	# Construct the local date-time of the astronomical Julian Date &ajd.
	"""
	return DateTime.of_ajd(ajd, offset)

def civil(pit:DateTime) -> tuple:
	return pit.civil()

def year(pit:DateTime) -> int:
	return pit.year

def month(pit:DateTime) -> int:
	return pit.month

def mday(pit:DateTime) -> int:
	return pit.day

def hour(pit:DateTime) -> int:
	return pit.hour

def minute(pit:DateTime) -> int:
	return pit.minute

def second(pit:DateTime) -> int:
	return pit.second

def wday(pit:DateTime) -> int:
	"""
	# Day of the week of &pit; 1 is Sunday and 7 is Saturday.
	"""
	return pit.weekday

def yday(pit:DateTime) -> int:
	"""
	# Day of the year of &pit; 1 is January 1st.
	"""
	return pit.day_of_year

def unixtime(pit:DateTime):
	"""
	# Seconds since 1970-01-01T00:00:00Z of &pit.
	"""
	return pit.unix

def is_valid_date(year, month, day) -> bool:
	return calendar.is_valid_date(year, month, day)

"""
# Gregorian calendar functions and data.
"""
import itertools

#: English names of the months of the year.
month_names = (
	"January",
	"February",
	"March",
	"April",
	"May",
	"June",
	"July",
	"August",
	"September",
	"October",
	"November",
	"December",
)

#: Number of months in a year.
months_in_year = len(month_names)

#: Abbreviations for the English names of the months of the year.
month_abbreviations = (
	"Jan", "Feb", "Mar",
	"Apr", "May", "Jun",
	"Jul", "Aug", "Sep",
	"Oct", "Nov", "Dec",
)

#: Finite map associating the lowercase names and abbreviations of the months with their one-based number.
month_name_to_number = {
	month_names[i].lower(): i + 1 for i in range(months_in_year)
}
month_name_to_number.update([
	(k[:3], v) for (k, v) in list(month_name_to_number.items())
])

#: Definition of a year in terms of month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding each month in a common year.
common_year_offsets = (0,) + tuple(itertools.accumulate(calendar_year[:-1]))

#: Days preceding each month in a leap year.
leap_year_offsets = (0,) + tuple(itertools.accumulate(calendar_leap[:-1]))

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def month_name(month):
	"""
	# The English name of the one-based &month.
	"""
	return month_names[month - 1]

def day_of_year(month, day, leap):
	"""
	# The one-based ordinal of the day within its year.

	# [ Parameters ]
	# /month/
		# One-based month of the year.
	# /day/
		# Day of the month.
	# /leap/
		# Whether the year holds a February 29th.
	"""
	if leap:
		return leap_year_offsets[month - 1] + day
	return common_year_offsets[month - 1] + day

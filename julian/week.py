"""
# Week based measures of time: days of seven.

# Weekdays are numbered from one, Sunday, through seven, Saturday.
"""
import math

#: English names of the days of the week.
weekday_names = (
	'Sunday',
	'Monday',
	'Tuesday',
	'Wednesday',
	'Thursday',
	'Friday',
	'Saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the English names of the days of the week.
weekday_abbreviations = (
	'Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat',
)

#: Map of lowercase weekday names and abbreviations to their one-based number.
weekday_name_to_number = {
	weekday_names[i].lower(): i + 1
	for i in range(days_in_week)
}
weekday_name_to_number.update([
	(k[:3], v) for (k, v) in list(weekday_name_to_number.items())
])

def day_of_week(jd, floor=math.floor):
	"""
	# Derive the one-based day of week of the Julian Date &jd; 1 is Sunday.
	"""
	return ((floor(jd) + 1) % days_in_week) + 1

def weekday_name(weekday):
	"""
	# The English name of the one-based &weekday.
	"""
	return weekday_names[weekday - 1]

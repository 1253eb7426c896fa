"""
"""
from .. import week
from .. import calendar

def test_names(test):
	test/7 == week.days_in_week
	test/'Sunday' == week.weekday_name(1)
	test/'Saturday' == week.weekday_name(7)
	test/'Fri' == week.weekday_abbreviations[5]
	test/6 == week.weekday_name_to_number['friday']
	test/6 == week.weekday_name_to_number['fri']

def test_day_of_week(test):
	test/6 == week.day_of_week(calendar.jdn_from_date(2021, 1, 1)) # Friday
	test/7 == week.day_of_week(calendar.jdn_from_date(2000, 1, 1)) # Saturday
	test/5 == week.day_of_week(calendar.jdn_from_date(1970, 1, 1)) # Thursday
	# The reform did not interrupt the week.
	test/5 == week.day_of_week(calendar.jdn_from_date(1582, 10, 4)) # Thursday
	test/6 == week.day_of_week(calendar.jdn_from_date(1582, 10, 15)) # Friday

def test_day_of_week_fractional(test):
	jdn = calendar.jdn_from_date(2021, 1, 1)
	test/6 == week.day_of_week(jdn + 0.999)
	test/7 == week.day_of_week(jdn + 1)

def test_day_of_week_cycle(test):
	start = calendar.jdn_from_date(2021, 1, 3) # Sunday
	for i in range(28):
		test/((i % 7) + 1) == week.day_of_week(start + i)

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])

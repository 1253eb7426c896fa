"""
"""
import itertools
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/True == gregorian.year_is_leap(2004)
	test/False == gregorian.year_is_leap(2021)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(1704)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1604, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_month_tables(test):
	test/12 == len(gregorian.month_names)
	test/12 == len(gregorian.month_abbreviations)
	test/"January" == gregorian.month_name(1)
	test/"December" == gregorian.month_name(12)
	test/"Sep" == gregorian.month_abbreviations[8]
	test/1 == gregorian.month_name_to_number['january']
	test/9 == gregorian.month_name_to_number['sep']

def test_year_lengths(test):
	test/365 == sum(gregorian.calendar_year)
	test/366 == sum(gregorian.calendar_leap)

def test_offsets(test):
	test/0 == gregorian.common_year_offsets[0]
	test/31 == gregorian.common_year_offsets[1]
	test/59 == gregorian.common_year_offsets[2]
	test/60 == gregorian.leap_year_offsets[2]
	test/334 == gregorian.common_year_offsets[11]
	test/335 == gregorian.leap_year_offsets[11]

def test_day_of_year(test):
	test/1 == gregorian.day_of_year(1, 1, False)
	test/60 == gregorian.day_of_year(3, 1, False)
	test/61 == gregorian.day_of_year(3, 1, True)
	test/365 == gregorian.day_of_year(12, 31, False)
	test/366 == gregorian.day_of_year(12, 31, True)

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])

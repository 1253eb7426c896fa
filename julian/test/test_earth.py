"""
"""
import fractions
from .. import earth

Fraction = fractions.Fraction

def test_units(test):
	test/86400 == earth.seconds_in_day
	test/1440 == earth.minutes_in_day
	test/Fraction(1, 24) == earth.hour
	test/1 == earth.second * 86400

def test_timeofday_from_fraction(test):
	test/(0, 0, 0, Fraction(0)) == earth.timeofday_from_fraction(Fraction(0))
	test/(18, 0, 0, Fraction(0)) == earth.timeofday_from_fraction(Fraction(3, 4))
	test/(12, 0, 0, Fraction(1, 2)) == earth.timeofday_from_fraction(Fraction(1, 2) + Fraction(1, 86400 * 2))
	test/(23, 59, 59, Fraction(0)) == earth.timeofday_from_fraction(1 - Fraction(1, 86400))

def test_timeofday_type_preservation(test):
	fr = earth.timeofday_from_fraction(Fraction(1, 3))[3]
	test.isinstance(fr, Fraction)

	h, m, s, fr = earth.timeofday_from_fraction(0.75)
	test/18 == h
	test.isinstance(fr, float)

	test/(0, 0, 0, 0) == earth.timeofday_from_fraction(0)

def test_fraction_from_timeofday(test):
	test/Fraction(1, 2) == earth.fraction_from_timeofday(12, 0, 0)
	test/Fraction(18*3600 + 30*60 + 15, 86400) == earth.fraction_from_timeofday(18, 30, 15)
	test/Fraction(0) == earth.fraction_from_timeofday(0, 0, 0)
	# Excess fields overflow onto the larger units.
	test/earth.fraction_from_timeofday(1, 0, 0) == earth.fraction_from_timeofday(0, 60, 0)

def test_timeofday_round_trip(test):
	for seconds in range(0, 86400, 7):
		h, rem = divmod(seconds, 3600)
		m, s = divmod(rem, 60)
		fr = earth.fraction_from_timeofday(h, m, s)
		test/(h, m, s, Fraction(0)) == earth.timeofday_from_fraction(fr)

def test_subsecond_composition(test):
	fr = earth.fraction_from_timeofday(6, 7, 8) + Fraction(1, 8) / earth.seconds_in_day
	test/(6, 7, 8, Fraction(1, 8)) == earth.timeofday_from_fraction(fr)

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])

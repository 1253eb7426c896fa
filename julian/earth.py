"""
Data and conversions regarding the subdivisions of the earth day.
"""
import fractions

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of minutes contained in an earth `day`.
minutes_in_day = hours_in_day * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = minutes_in_day * seconds_in_minute

hour = fractions.Fraction(1, hours_in_day)
minute = fractions.Fraction(1, minutes_in_day)
second = fractions.Fraction(1, seconds_in_day)

def timeofday_from_fraction(fraction, divmod=divmod, int=int):
	"""
	# Decompose a fraction of a day into `(hour, minute, second, subsecond)`.

	# The hour, minute, and second are integers; the subsecond is the remaining
	# fraction of a second expressed with the numeric type of &fraction so that
	# exact representations stay exact.

	#!/pl/python
		assert timeofday_from_fraction(Fraction(3, 4)) == (18, 0, 0, Fraction(0))
	"""
	Type = type(fraction)

	h, fraction = divmod(fraction, hour)
	m, fraction = divmod(fraction, minute)
	s, fraction = divmod(fraction, second)

	return (int(h), int(m), int(s), Type(fraction * seconds_in_day))

def fraction_from_timeofday(h, m, s, Fraction=fractions.Fraction):
	"""
	# Compose the fraction of a day identified by the hour, minute, and second.

	# Subseconds are not accepted; callers add them as `subsecond/86400`.
	"""
	return Fraction(h, hours_in_day) + Fraction(m, minutes_in_day) + Fraction(s, seconds_in_day)

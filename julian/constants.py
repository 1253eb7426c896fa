"""
# Fixed quantities shared by the conversion functions.

# [ Elements ]
# /reform/
	# Julian Day Number of 1582-10-15, the first day of the Gregorian calendar.
	# Day numbers less than this are interpreted with the Julian calendar.
# /unix_epoch/
	# Julian Day Number of 1970-01-01.
# /astronomical_delta/
	# Difference between the local midnight based Julian Date and the
	# astronomical Julian Date counted from noon.
# /offset_units_in_hour/
	# Number of offset units, quarter hours, in an hour.
# /offset_units_in_day/
	# Number of offset units in a day.
# /offset_limit/
	# Maximum magnitude of an offset in offset units; twenty-four hours.
# /days/
	# A day as a Julian Date difference.
# /hours/
	# An hour as an exact fraction of a day.
# /minutes/
	# A minute as an exact fraction of a day.
# /seconds/
	# A second as an exact fraction of a day.
"""
import fractions

reform = 2299161
unix_epoch = 2440588
astronomical_delta = fractions.Fraction(1, 2)

offset_units_in_hour = 4
offset_units_in_day = offset_units_in_hour * 24
offset_limit = offset_units_in_day

days = 1
hours = fractions.Fraction(days, 24)
minutes = hours / 60
seconds = minutes / 60

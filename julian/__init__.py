"""
[ About ]
---------

julian represents calendar dates and date-times as a single continuous count
of days, the Julian Date, starting at midnight of January 1st, 4713 BCE.
The integral part identifies the local calendar day and the fractional part the
time of day.

Calendar Support:

	- Proleptic Julian before 1582-10-15.
	- Gregorian on and after 1582-10-15.

The surface functionality is provided by &.library:

#!/pl/python
	import julian.library as jdlib

[ Calendar Representation ]
---------------------------

Dates are validated on construction. Fields that do not name a day
of the calendar, including the ten days skipped by the reform, raise
&.core.InvalidDate.

#!/pl/python
	d = jdlib.date(1582, 10, 4)
	assert (d + 1).civil() == (1582, 10, 15)

Date-times are exact; the Julian Date of a value constructed from fields
is a &fractions.Fraction.

#!/pl/python
	dt = jdlib.datetime(2021, 1, 1, 12, 0, 0, 0, 0)
	assert dt.jd == 2459216 + Fraction(1, 2)

[ Offsets ]
-----------

A value carries a fixed UTC offset in quarter hours. The offset is
never used to adjust the fields of a value; it is used when
subtracting and ordering date-times.

#!/pl/python
	a = jdlib.datetime(2021, 1, 1, 4, 0, 0, 0, 4)
	b = jdlib.datetime(2021, 1, 1, 0, 0, 0, 0, 0)
	assert a - b == 0
	assert not (a < b) and not (a > b)
	assert a != b # Equality compares the fields.

No time zone database is consulted and daylight saving time is not
considered. &.library.now uses the offset reported by the system for the
current instant.
"""
from .library import *

"""
"""
import fractions
from .. import format
from .. import types

Fraction = fractions.Fraction
DateTime = types.DateTime

def test_offset_string(test):
	test/'+0000' == format.offset_string(0)
	test/'+0400' == format.offset_string(16)
	test/'-0015' == format.offset_string(-1)
	test/'-0530' == format.offset_string(-22)
	test/'+0545' == format.offset_string(23)
	test/'+05:45' == format.offset_string(23, ':')

def test_string_date(test):
	test/"1 Jan 2021" == format.string(DateTime.of_date(2021, 1, 1))
	test/"31 Dec 1999" == format.string(DateTime.of_date(1999, 12, 31))
	test/"15 Oct 1582" == str(DateTime.of_date(1582, 10, 15))

def test_string_datetime(test):
	dt = DateTime.of_datetime(2021, 1, 1, 4, 5, 6, Fraction(1, 4), 4)
	test/"1 Jan 2021 04:05:06.25 (+0400)" == str(dt)

	dt = DateTime.of_datetime(2021, 3, 1, 18, 30, 0, 0, -5.5)
	test/"1 Mar 2021 18:30:00.00 (-0530)" == str(dt)

	dt = DateTime.of_datetime(2021, 3, 1, 0, 0, 0, 0.999, 0)
	test/"1 Mar 2021 00:00:00.99 (+0000)" == str(dt)

def test_iso8601(test):
	test/"2021-01-01" == format.format_iso8601(DateTime.of_date(2021, 1, 1))
	dt = DateTime.of_datetime(2021, 1, 1, 4, 5, 6, Fraction(1, 4), 4)
	test/"2021-01-01T04:05:06.250000+04:00" == format.format_iso8601(dt)
	dt = DateTime.of_datetime(999, 2, 3, 23, 0, 0, 0, -1)
	test/"0999-02-03T23:00:00.000000-01:00" == format.format_iso8601(dt)

def test_representation(test):
	test/"(julian.date@'2021-01-01')" == repr(DateTime.of_date(2021, 1, 1))
	dt = DateTime.of_datetime(2021, 1, 1, 12, 0, 0, 0, 0)
	test/"(julian.datetime@'2021-01-01T12:00:00.000000+00:00')" == repr(dt)

def test_formatter(test):
	test/format.formatter('display') % format.string
	test/format.formatter('iso8601') % format.format_iso8601
	test/KeyError ^ (lambda: format.formatter('rfc1123'))

if __name__ == '__main__':
	import sys; from . import harness
	harness.execute(sys.modules[__name__])

"""
# System clock and local zone access.

# The local zone is read from the system once, on first use of &zone, and is
# never written again. Setting `JULIAN_UTC_OFFSET` (hours) and, optionally,
# `JULIAN_ZONE` in the environment replaces the zone reported by the system
# with a fixed one.
"""
import os
import time
import logging
import fractions
import functools
import collections

from . import core
from . import types

logger = logging.getLogger(__name__)

#: The offset, in hours, and the name of the process's local zone.
#: &fixed is &True when the zone was configured by the environment.
Zone = collections.namedtuple('Zone', ('offset', 'name', 'fixed'))

def _real_clock_read(clock=time.time_ns):
	try:
		return clock()
	except OSError as err:
		logger.error("system clock could not be read: %s", err)
		raise core.EnvironmentUnavailable("system clock could not be read") from err

def _local_fields(seconds, localtime=time.localtime):
	try:
		return localtime(seconds)
	except (OSError, OverflowError, ValueError) as err:
		raise core.EnvironmentUnavailable("local time could not be identified") from err

def _environment_zone(environ):
	offset = environ.get('JULIAN_UTC_OFFSET')
	if offset is None:
		return None

	try:
		hours = float(offset)
	except ValueError as err:
		raise core.EnvironmentUnavailable("JULIAN_UTC_OFFSET is not a number: %r" % (offset,)) from err

	return Zone(hours, environ.get('JULIAN_ZONE', 'UTC%+g' % (hours,)), True)

def _system_zone(tm):
	if tm.tm_gmtoff is None:
		raise core.EnvironmentUnavailable("system does not report the local UTC offset")
	return Zone(tm.tm_gmtoff / 3600, tm.tm_zone, False)

@functools.lru_cache(1)
def zone() -> Zone:
	"""
	# The offset and name of the local zone, read once per process.

	# [ Exceptions ]
	# /&core.EnvironmentUnavailable/
		# The zone could not be identified or its override is malformed.
	"""
	z = _environment_zone(os.environ)
	if z is None:
		z = _system_zone(_local_fields(_real_clock_read() // 1000000000))
		logger.debug("local zone %s identified by the system, offset %s hours", z.name, z.offset)
	else:
		logger.debug("local zone %s configured by the environment, offset %s hours", z.name, z.offset)
	return z

def now(DateTime=types.DateTime, Fraction=fractions.Fraction) -> types.DateTime:
	"""
	# Get the current local time according to the system's real clock.

	# The value is constructed from the local civil fields and carries the
	# offset reported for the instant, or the configured offset of &zone.
	"""
	ns = _real_clock_read()
	seconds, subsecond = divmod(ns, 1000000000)

	z = zone()
	if z.fixed:
		return DateTime.of_unix(Fraction(ns, 1000000000), z.offset)

	tm = _local_fields(seconds)
	return DateTime.of_datetime(
		tm.tm_year, tm.tm_mon, tm.tm_mday,
		tm.tm_hour, tm.tm_min,
		min(tm.tm_sec, 59), # leap second
		Fraction(subsecond, 1000000000),
		_system_zone(tm).offset,
	)

def today(DateTime=types.DateTime) -> types.DateTime:
	"""
	# The date-only value of the current local date.
	"""
	return now(DateTime).date()

def current_time_millis() -> int:
	"""
	# Milliseconds since the Unix epoch.
	"""
	return _real_clock_read() // 1000000

def current_time_micros() -> int:
	"""
	# Microseconds since the Unix epoch.
	"""
	return _real_clock_read() // 1000

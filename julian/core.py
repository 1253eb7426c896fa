"""
# Exception hierarchy for calendar and clock operations.
"""

class Error(Exception):
	"""
	# Base class of the exceptions raised by the package.
	"""

class InvalidDate(Error, ValueError):
	"""
	# The given civil fields do not identify a day on the calendar.

	# [ Elements ]
	# /year/
		# The offending year.
	# /month/
		# The offending month.
	# /day/
		# The offending day of the month.
	"""

	def __init__(self, year, month, day):
		self.year = year
		self.month = month
		self.day = day
		super().__init__(year, month, day)

	@property
	def date(self):
		return (self.year, self.month, self.day)

	def __str__(self):
		return "invalid date: %s-%s-%s" % self.date

class InvalidOffset(Error, ValueError):
	"""
	# The UTC offset exceeds twenty-four hours in either direction.
	"""

	def __init__(self, offset):
		self.offset = offset
		super().__init__(offset)

	def __str__(self):
		return "offset out of range: %r hours" % (self.offset,)

class EnvironmentUnavailable(Error, OSError):
	"""
	# The system clock or the local zone could not be read.
	"""

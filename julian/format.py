"""
# Format date-time values as strings.

# Date-only values are rendered as `"D Mon YYYY"` and date-times as
# `"D Mon YYYY HH:MM:SS.ff (+HHMM)"`. &iso8601 provides the common
# interchange form.

# The functions here only read the civil fields and offset of the given value;
# parsing is not provided.
"""
from . import gregorian

display = "{day} {month} {year}"
display_time = "{day} {month} {year} {hour:02}:{minute:02}:{second:02}.{centisecond:02} ({offset})"
iso8601_date = "{0:04}-{1:02}-{2:02}"
iso8601 = "{0:04}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}.{6:06}{7}"

def offset_string(units, separator=''):
	"""
	# Render the quarter hour &units as a signed hours and minutes pair.

	#!/pl/python
		assert offset_string(-22) == '-0530'
		assert offset_string(4, ':') == '+01:00'
	"""
	sign = '-' if units < 0 else '+'
	hours, quarters = divmod(abs(units), 4)
	return f"{sign}{hours:02}{separator}{quarters * 15:02}"

def string(pit, abbreviations=gregorian.month_abbreviations):
	"""
	# The display form of the date-only or date-time &pit.
	"""
	if pit.date_only:
		y, m, d = pit.civil()
		return display.format(day=d, month=abbreviations[m-1], year=y)

	y, m, d, hh, mm, ss, fr = pit.civil()
	return display_time.format(
		day=d, month=abbreviations[m-1], year=y,
		hour=hh, minute=mm, second=ss,
		centisecond=int(fr * 100),
		offset=offset_string(pit.offset),
	)

def format_iso8601(pit):
	"""
	# The ISO-8601 form of &pit; microsecond precision with the offset appended.
	"""
	if pit.date_only:
		return iso8601_date.format(*pit.civil())

	y, m, d, hh, mm, ss, fr = pit.civil()
	return iso8601.format(y, m, d, hh, mm, ss, int(fr * 1000000), offset_string(pit.offset, ':'))

def representation(pit):
	if pit.date_only:
		return f"(julian.date@'{format_iso8601(pit)}')"
	return f"(julian.datetime@'{format_iso8601(pit)}')"

formatters = {
	'display': string,
	'iso8601': format_iso8601,
}

def formatter(name):
	"""
	# Retrieve the formatting function identified by &name.
	"""
	return formatters[name]

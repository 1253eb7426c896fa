"""
# Julian Date based calendar and date-time values.
"""

identity = 'https://fault.io/project/python/julian'
name = 'julian'
abstract = 'Calendar dates and date-times on the Julian Date axis.'

fork = 'reform' # Explicit branch name and a codename for the major version of the project.
release = None

#: Relevant emoji or reference--URL or relative file path--to an image file.
icon = '📅'

#: Responsible Party
controller = 'fault.io'

#: Contact point for the Responsible Party
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))

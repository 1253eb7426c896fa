"""
# Tests for the julian package.
"""

"""
# Provide the contention harness to the test modules under pytest.
"""
import pytest

from . import harness

@pytest.fixture
def test(request):
	t = harness.Test(request.node.name)
	with t.exits:
		yield t

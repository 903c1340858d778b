"""Root-level pytest fixtures for the require test suite."""

import pytest
from hamcrest.core.base_matcher import BaseMatcher

from require import RequirementViolated


class InstanceOfWithType(BaseMatcher):
    """instance_of variant whose mismatch names the actual type."""

    def __init__(self, expected_type):
        self.expected_type = expected_type

    def _matches(self, item):
        return isinstance(item, self.expected_type)

    def describe_to(self, description):
        description.append_text("an instance of ").append_text(self.expected_type.__name__)

    def describe_mismatch(self, item, mismatch_description):
        mismatch_description.append_description_of(item).append_text(" is a ").append_text(
            type(item).__name__
        )


@pytest.fixture
def instance_of_with_type():
    """Factory for matchers that explain type mismatches.

    Examples
    --------
    >>> def test_type(instance_of_with_type):
    ...     require_that("actual", is_(instance_of_with_type(int)))
    """
    return InstanceOfWithType


@pytest.fixture
def raised():
    """Call a function and return the RequirementViolated it raises."""
    def _raised(func, *args):
        with pytest.raises(RequirementViolated) as exc_info:
            func(*args)
        return exc_info.value

    return _raised

"""`require` - requirement checks that mark a test as invalid, not failed.

Modules:
- base: error, require_that, require_true, require_false
- failure: RequirementViolated and Observation
- schemas: message format configuration
"""

from require.failure import Observation, RequirementViolated
from require.base import error, require_that, require_true, require_false
from require.schemas import MessageFormat, resolve_message_format

__version__ = "0.1.0"

__all__ = [
    "RequirementViolated",
    "Observation",
    "error",
    "require_that",
    "require_true",
    "require_false",
    "MessageFormat",
    "resolve_message_format",
]

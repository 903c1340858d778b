"""Pydantic configuration schemas for require.

Exports
-------
MessageFormat : class
    Labels used when rendering violation messages
resolve_message_format : function
    Single entrypoint for building a MessageFormat from overrides
"""

from require.schemas.message import MessageFormat, resolve_message_format

__all__ = [
    'MessageFormat',
    'resolve_message_format',
]

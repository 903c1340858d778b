"""Base Pydantic model for require configs."""

from pydantic import BaseModel, ConfigDict


class RequireBaseModel(BaseModel):
    """Base model for all require configuration schemas.

    - No extra fields allowed
    - Validates assignments after initialization
    - Keeps whitespace in strings (message labels are padded)
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=False,
    )

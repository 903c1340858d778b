"""MessageFormat: labels used to render requirement violations.

The defaults reproduce the conventional hamcrest layout::

    identifier
    Expected: 'expected'
         but: was 'actual'
"""

from typing import Optional, Union

from pydantic import ConfigDict, model_validator

from require.schemas.base import RequireBaseModel


class MessageFormat(RequireBaseModel):
    """Rendering labels for RequirementViolated messages.

    Frozen: a format is shared by every exception of a class, so it must
    not change once built.
    """

    model_config = ConfigDict(frozen=True)

    expected_label: str = "Expected: "
    mismatch_label: str = "     but: "
    observed_label: str = "Observed: "
    line_separator: str = "\n"

    @model_validator(mode="after")
    def validate_labels(self):
        """Labels must be non-empty single-line strings."""
        if not self.line_separator:
            raise ValueError("line_separator must not be empty")

        for name in ("expected_label", "mismatch_label", "observed_label"):
            label = getattr(self, name)
            if not label:
                raise ValueError(f"{name} must not be empty")
            if self.line_separator in label:
                raise ValueError(
                    f"{name} must not contain the line separator {self.line_separator!r}"
                )

        return self


def resolve_message_format(
    overrides: Optional[Union[dict, MessageFormat]] = None,
) -> MessageFormat:
    """Resolve a MessageFormat from defaults plus overrides.

    Parameters
    ----------
    overrides : dict or MessageFormat, optional
        Labels to replace. A MessageFormat is returned as-is; a dict is
        merged over the defaults. None or empty gives the defaults.

    Returns
    -------
    MessageFormat
        Validated, frozen message format.

    Raises
    ------
    pydantic.ValidationError
        If an override names an unknown field or breaks a label rule.

    Examples
    --------
    >>> fmt = resolve_message_format({"observed_label": "Got: "})
    >>> fmt.observed_label
    'Got: '
    >>> fmt.expected_label
    'Expected: '
    """
    if isinstance(overrides, MessageFormat):
        return overrides

    merged = MessageFormat().model_dump()
    merged.update(overrides or {})
    return MessageFormat.model_validate(merged)

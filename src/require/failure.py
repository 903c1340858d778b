"""The failure raised when a test requirement is not met.

A requirement violation means the test itself is invalid under the current
conditions. It is not a failed assertion about the code under test, so it
does not subclass AssertionError: runners report it as an ERROR rather
than a FAIL.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher
from hamcrest.core.selfdescribing import SelfDescribing
from hamcrest.core.string_description import tostring

from require.schemas.message import MessageFormat, resolve_message_format

_UNSET = object()


@dataclass(frozen=True)
class Observation:
    """A value observed by a requirement check.

    Wrapping the value keeps "nothing was observed" (no Observation) apart
    from "None was observed" (``Observation(None)``).
    """
    value: Any


class RequirementViolated(RuntimeError, SelfDescribing):
    """Raised when a requirement of a test is not met.

    Parameters
    ----------
    description : str, optional
        Free text describing the requirement.
    observed : Any, keyword-only, optional
        The value that was checked. May be None. When it is an exception it
        also becomes ``__cause__``.
    expectation : Matcher, keyword-only, optional
        The matcher the observed value failed. Requires ``observed``.
    cause : BaseException, keyword-only, optional
        Causal predecessor. Only chained, never reported as the observed
        value.

    Raises
    ------
    ValueError
        If ``expectation`` is given without ``observed``.

    Examples
    --------
    >>> from hamcrest import equal_to
    >>> str(RequirementViolated("identifier", observed="actual", expectation=equal_to("expected")))
    "identifier\\nExpected: 'expected'\\n     but: was 'actual'"
    """

    message_format: ClassVar[MessageFormat] = resolve_message_format()

    def __init__(
        self,
        description: Optional[str] = None,
        *,
        observed: Any = _UNSET,
        expectation: Optional[Matcher] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        if observed is _UNSET:
            if expectation is not None:
                raise ValueError("An expectation requires an observed value")
            observation = None
        else:
            observation = Observation(observed)
            if cause is None and isinstance(observed, BaseException):
                cause = observed

        if description is None:
            super().__init__()
        else:
            super().__init__(description)

        self._description = description
        self._observation = observation
        self._expectation = expectation
        if cause is not None:
            self.__cause__ = cause

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def observation(self) -> Optional[Observation]:
        return self._observation

    @property
    def has_observed(self) -> bool:
        return self._observation is not None

    @property
    def observed(self) -> Any:
        return None if self._observation is None else self._observation.value

    @property
    def expectation(self) -> Optional[Matcher]:
        return self._expectation

    @property
    def message(self) -> str:
        """Rendered message. Recomputed on every access."""
        return tostring(self)

    def summary(self) -> str:
        """Type name and message, as shown for an uncaught exception."""
        return f"{type(self).__name__}: {self.message}"

    def describe_to(self, description: Description) -> None:
        fmt = self.message_format

        if self._description is not None:
            description.append_text(self._description)

        if self._observation is None:
            return

        if self._expectation is not None:
            description.append_text(fmt.line_separator + fmt.expected_label)
            description.append_description_of(self._expectation)
            description.append_text(fmt.line_separator + fmt.mismatch_label)
            self._expectation.describe_mismatch(self._observation.value, description)
        else:
            description.append_text(fmt.observed_label)
            description.append_description_of(self._observation.value)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (
            _restore,
            (type(self), self._description, self._observation,
             self._expectation, self.__cause__),
        )


def _restore(cls, description, observation, expectation, cause):
    """Rebuild a pickled RequirementViolated."""
    if observation is None:
        return cls(description, cause=cause)
    return cls(
        description,
        observed=observation.value,
        expectation=expectation,
        cause=cause,
    )

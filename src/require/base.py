"""Requirement checks for tests.

A test can end four ways: PASSED, FAILED, ERROR or SKIPPED. PASS/FAIL is
obvious; the others are not.

A test should be SKIPPED when conditions external to the module under test
mean it cannot run: it needs a particular vendor's database, or it only
makes sense on Windows. That is what assumptions are for.

A test should ERROR when it relies on something about the module under test
that another test already verifies. A login test needs a login link on the
home page, and a separate test checks that the link exists. If the link
goes away, assuming it would silently skip the login test, and asserting it
would add one more FAIL to a pile of failures, hiding where to start
looking. Requiring it marks the login test as invalid instead, so the one
real failure stands out.

Every function here either returns None or raises RequirementViolated.
None of them hold state between calls.
"""

import logging
from typing import Any, Dict, List, NoReturn, Optional, Tuple, TypeVar, overload

from hamcrest import is_
from hamcrest.core.matcher import Matcher

from require.failure import RequirementViolated

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _fail(violation: RequirementViolated) -> NoReturn:
    logger.debug("Requirement violated: %s", violation)
    raise violation


def _bind(
    name: str,
    params: Tuple[str, ...],
    args: Tuple[Any, ...],
    kwargs: Dict[str, Any],
) -> Tuple[Optional[str], List[Any]]:
    """Bind call arguments to an optional description followed by ``params``.

    A leading positional argument is taken as the description when exactly
    one more argument than ``params`` was supplied.
    """
    for key in kwargs:
        if key != "description" and key not in params:
            raise TypeError(f"{name}() got an unexpected keyword argument {key!r}")

    positional = list(args)
    if "description" in kwargs:
        description = kwargs.pop("description")
    elif len(positional) + len(kwargs) == len(params) + 1:
        description = positional.pop(0)
    else:
        description = None

    if len(positional) > len(params):
        raise TypeError(
            f"{name}() takes {len(params)} or {len(params) + 1} positional arguments "
            f"but {len(args)} were given"
        )

    values = dict(zip(params, positional))
    for key, value in kwargs.items():
        if key in values:
            raise TypeError(f"{name}() got multiple values for argument {key!r}")
        values[key] = value

    for param in params:
        if param not in values:
            raise TypeError(f"{name}() missing required argument {param!r}")

    return description, [values[param] for param in params]


def error(message: Optional[str] = None) -> NoReturn:
    """Abort the test because a requirement is not met.

    Analogue of ``pytest.fail`` for requirements.

    Parameters
    ----------
    message : str, optional
        Description of the unmet requirement.

    Raises
    ------
    RequirementViolated
        Always.
    """
    _fail(RequirementViolated(message))


@overload
def require_that(observed: T, expectation: Matcher[T]) -> None: ...


@overload
def require_that(description: Optional[str], observed: T, expectation: Matcher[T]) -> None: ...


def require_that(*args: Any, **kwargs: Any) -> None:
    """Require that an observed value matches an expectation.

    Analogue of ``hamcrest.assert_that`` for requirements. Called either as
    ``require_that(observed, expectation)`` or as
    ``require_that(description, observed, expectation)``; every argument
    may also be passed by keyword.

    Parameters
    ----------
    description : str, optional
        Description of the requirement, used as the first message line.
    observed : Any
        The value to check.
    expectation : Matcher
        Matcher the observed value must satisfy.

    Raises
    ------
    RequirementViolated
        If the expectation does not match the observed value.
    TypeError
        If the arguments do not fit either call form.

    Examples
    --------
    >>> from hamcrest import equal_to, has_item
    >>> require_that("home page has a login link", links, has_item("login"))
    >>> require_that(response.status, equal_to(200))
    """
    description, (observed, expectation) = _bind(
        "require_that", ("observed", "expectation"), args, kwargs
    )
    if not expectation.matches(observed):
        _fail(RequirementViolated(description, observed=observed, expectation=expectation))


@overload
def require_true(observed: bool) -> None: ...


@overload
def require_true(description: Optional[str], observed: bool) -> None: ...


def require_true(*args: Any, **kwargs: Any) -> None:
    """Require that a condition is true.

    Called as ``require_true(observed)`` or
    ``require_true(description, observed)``.

    Raises
    ------
    RequirementViolated
        If the condition is not true.
    """
    description, (observed,) = _bind("require_true", ("observed",), args, kwargs)
    require_that(description, observed, is_(True))


@overload
def require_false(observed: bool) -> None: ...


@overload
def require_false(description: Optional[str], observed: bool) -> None: ...


def require_false(*args: Any, **kwargs: Any) -> None:
    """Require that a condition is false.

    Called as ``require_false(observed)`` or
    ``require_false(description, observed)``.

    Raises
    ------
    RequirementViolated
        If the condition is not false.
    """
    description, (observed,) = _bind("require_false", ("observed",), args, kwargs)
    require_that(description, observed, is_(False))

"""
Validated wrapper types for the primitive values of a contact.

Each wrapper holds exactly one validated string and can only be obtained
through its `create` classmethod, which returns a `Result` instead of raising.
Instantiating a wrapper directly raises `TypeError`, and `dataclasses.replace()`
re-validates the new value and raises `ValueError` if it is invalid, so an
invalid wrapper can never exist and downstream code never needs to re-validate.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar, Self

from returns.result import Failure, Result, Success

from .. import config
from ..errors import ReasonCode, ValidationError

_CONSTRUCTION_KEY = object()


def _check_construction_key(instance: object, key: object) -> None:
    if key is not _CONSTRUCTION_KEY:
        raise TypeError(
            f"{type(instance).__name__} cannot be instantiated directly; "
            f"use {type(instance).__name__}.create()"
        )


def _check_canonical(instance: object, value: object, result: Result[object, ValidationError]) -> None:
    # dataclasses.replace() keeps the construction key.
    if isinstance(result, Failure):
        raise ValueError(f"invalid {type(instance).__name__}: {result.failure()}")
    if result.unwrap() != value:
        raise ValueError(f"{type(instance).__name__} value {value!r} is not in canonical form")


@dataclass(frozen=True, slots=True)
class _Wrapper:
    """Base for single-value wrappers; subclasses only supply `_validate`."""

    value: str
    _key: object = field(default=None, repr=False, compare=False, kw_only=True)

    def __post_init__(self) -> None:
        _check_construction_key(self, self._key)
        _check_canonical(self, self.value, self._validate(self.value))

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        raise NotImplementedError

    @classmethod
    def create(cls, raw: str) -> Result[Self, ValidationError]:
        """Validate `raw` and wrap its canonical form."""
        return cls._validate(raw).map(lambda canonical: cls(canonical, _key=_CONSTRUCTION_KEY))

    @classmethod
    def create_with[R](
        cls,
        raw: str,
        on_success: Callable[[Self], R],
        on_failure: Callable[[ValidationError], R],
    ) -> R:
        """Create with continuations: call exactly one of the two handlers."""
        result = cls.create(raw)
        if isinstance(result, Success):
            return on_success(result.unwrap())
        return on_failure(result.failure())

    def apply[R](self, func: Callable[[str], R]) -> R:
        """Unwrap with a continuation."""
        return func(self.value)

    def __str__(self) -> str:
        return self.value


class NonEmptyString(_Wrapper):
    """A string with at least one non-whitespace character, stored stripped."""

    __slots__ = ()

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        stripped = raw.strip()
        if not stripped:
            return Failure(ValidationError(ReasonCode.EMPTY_STRING, raw))
        return Success(stripped)


class EmailAddress(_Wrapper):
    """
    An email address with exactly one `@` between a non-empty local part and
    a non-empty domain. The address is stored exactly as given.
    """

    __slots__ = ()

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        if not raw:
            return Failure(ValidationError(ReasonCode.EMPTY_STRING, raw))
        at_signs = raw.count("@")
        if at_signs == 0:
            return Failure(ValidationError(ReasonCode.MISSING_AT_SIGN, raw))
        if at_signs > 1:
            return Failure(ValidationError(ReasonCode.MULTIPLE_AT_SIGNS, raw))
        local, domain = raw.split("@")
        if not local:
            return Failure(ValidationError(ReasonCode.EMPTY_LOCAL_PART, raw))
        if not domain:
            return Failure(ValidationError(ReasonCode.EMPTY_DOMAIN, raw))
        return Success(raw)

    @property
    def local_part(self) -> str:
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]


class StateCode(_Wrapper):
    """A two-letter state code, matched case-insensitively and stored upper case."""

    __slots__ = ()

    valid_codes: ClassVar[frozenset[str]] = config.VALID_STATE_CODES

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        canonical = raw.upper()
        if canonical not in cls.valid_codes:
            return Failure(ValidationError(ReasonCode.UNKNOWN_STATE_CODE, raw))
        return Success(canonical)


class ZipCode(_Wrapper):
    """A zip code of exactly five ASCII digits."""

    __slots__ = ()

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        if len(raw) != config.ZIP_CODE_LENGTH:
            return Failure(ValidationError(ReasonCode.INVALID_ZIP_LENGTH, raw))
        if not set(raw) <= config.ZIP_CODE_DIGITS:
            return Failure(ValidationError(ReasonCode.NON_DIGIT_ZIP, raw))
        return Success(raw)


class PhoneNumber(_Wrapper):
    """A phone number such as `602-675-2313` or `+1 (602) 675 2313`."""

    __slots__ = ()

    @classmethod
    def _validate(cls, raw: str) -> Result[str, ValidationError]:
        stripped = raw.strip()
        if not config.PHONE_PATTERN.fullmatch(stripped):
            return Failure(ValidationError(ReasonCode.INVALID_PHONE_NUMBER, raw))
        if sum(ch.isdigit() for ch in stripped) < config.PHONE_MIN_DIGITS:
            return Failure(ValidationError(ReasonCode.INVALID_PHONE_NUMBER, raw))
        return Success(stripped)


def _validate_middle_initial(raw: str | None) -> Result[str | None, ValidationError]:
    if raw is None:
        return Success(None)
    stripped = raw.strip().rstrip(".")
    if len(stripped) != config.MIDDLE_INITIAL_LENGTH or not stripped.isalpha():
        return Failure(ValidationError(ReasonCode.INVALID_MIDDLE_INITIAL, raw, field="middle_initial"))
    return Success(stripped.upper())


@dataclass(frozen=True, slots=True)
class PersonalName:
    """
    A person's name.

    Attributes:
        first_name: The validated, non-empty first name.
        middle_initial: A single upper-case letter, if present.
        last_name: The validated, non-empty last name.
    """

    first_name: NonEmptyString
    middle_initial: str | None
    last_name: NonEmptyString
    _key: object = field(default=None, repr=False, compare=False, kw_only=True)

    def __post_init__(self) -> None:
        _check_construction_key(self, self._key)
        _check_canonical(self, self.middle_initial, _validate_middle_initial(self.middle_initial))

    @classmethod
    def create(
        cls, first_name: str, last_name: str, middle_initial: str | None = None
    ) -> Result[Self, ValidationError]:
        """Validate each part of the name; the first failing part is reported."""
        first = NonEmptyString.create(first_name).alt(lambda err: err.for_field("first_name"))
        last = NonEmptyString.create(last_name).alt(lambda err: err.for_field("last_name"))
        return first.bind(
            lambda first_value: last.bind(
                lambda last_value: _validate_middle_initial(middle_initial).map(
                    lambda initial: cls(first_value, initial, last_value, _key=_CONSTRUCTION_KEY)
                )
            )
        )

    @property
    def full_name(self) -> str:
        parts = [self.first_name.value]
        if self.middle_initial:
            parts.append(f"{self.middle_initial}.")
        parts.append(self.last_name.value)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.full_name


__all__ = [
    "EmailAddress",
    "NonEmptyString",
    "PersonalName",
    "PhoneNumber",
    "StateCode",
    "ZipCode",
]

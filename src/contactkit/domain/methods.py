"""
Contact methods: a flat view of the ways a person can be reached.

A `ContactProfile` always has a primary method, which is how the rule "at
least one contact method" is expressed once phones join email and postal
addresses and the number of combinations makes a union of cases impractical.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self, assert_never

from returns.result import Failure, Result, Success

from ..errors import ReasonCode, ValidationError
from .contact import Both, Contact, ContactInfo, EmailContactInfo, EmailOnly, PostalContactInfo, PostalOnly
from .wrappers import PersonalName, PhoneNumber


@dataclass(frozen=True, slots=True)
class Email:
    info: EmailContactInfo


@dataclass(frozen=True, slots=True)
class Postal:
    info: PostalContactInfo


@dataclass(frozen=True, slots=True)
class HomePhone:
    number: PhoneNumber


@dataclass(frozen=True, slots=True)
class WorkPhone:
    number: PhoneNumber


ContactMethod = Email | Postal | HomePhone | WorkPhone


def contact_methods(info: ContactInfo) -> tuple[ContactMethod, ...]:
    """Flatten a `ContactInfo` into its contact methods, email first."""
    match info:
        case EmailOnly(email=email):
            return (Email(email),)
        case PostalOnly(postal=postal):
            return (Postal(postal),)
        case Both(email=email, postal=postal):
            return (Email(email), Postal(postal))
        case unreachable:
            assert_never(unreachable)


@dataclass(frozen=True, slots=True)
class ContactProfile:
    """
    A person and every way to reach them.

    Attributes:
        name: The person's name.
        primary: The required, preferred contact method.
        secondary: Further contact methods, in order of preference.
    """

    name: PersonalName
    primary: ContactMethod
    secondary: tuple[ContactMethod, ...] = ()

    @classmethod
    def from_methods(
        cls, name: PersonalName, methods: Sequence[ContactMethod]
    ) -> Result[Self, ValidationError]:
        """The first method becomes the primary one; an empty sequence is rejected."""
        if not methods:
            return Failure(ValidationError(ReasonCode.NO_CONTACT_METHODS, repr(list(methods))))
        return Success(cls(name, methods[0], tuple(methods[1:])))

    @classmethod
    def from_contact(cls, contact: Contact) -> Self:
        primary, *secondary = contact_methods(contact.info)
        return cls(contact.name, primary, tuple(secondary))

    @property
    def methods(self) -> tuple[ContactMethod, ...]:
        return (self.primary, *self.secondary)

    def with_method(self, method: ContactMethod) -> Self:
        """Return a copy with `method` appended to the secondary methods."""
        return type(self)(self.name, self.primary, (*self.secondary, method))


__all__ = [
    "ContactMethod",
    "ContactProfile",
    "Email",
    "HomePhone",
    "Postal",
    "WorkPhone",
    "contact_methods",
]

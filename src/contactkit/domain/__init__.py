"""
The domain package holds the contact model: validated wrapper types, the
closed `ContactInfo` variant with its update operations, and the flat
`ContactMethod` view used for reporting.
"""

from . import contact, methods, wrappers
from .contact import (
    Both,
    Contact,
    ContactInfo,
    EmailContactInfo,
    EmailOnly,
    PostalAddress,
    PostalContactInfo,
    PostalOnly,
    contact_from_email,
    contact_from_postal,
    mark_email_verified,
    mark_postal_validated,
    with_email_address,
    with_postal_address,
)
from .methods import ContactMethod, ContactProfile, Email, HomePhone, Postal, WorkPhone
from .wrappers import EmailAddress, NonEmptyString, PersonalName, PhoneNumber, StateCode, ZipCode

__all__ = [
    "Both",
    "Contact",
    "ContactInfo",
    "ContactMethod",
    "ContactProfile",
    "Email",
    "EmailAddress",
    "EmailContactInfo",
    "EmailOnly",
    "HomePhone",
    "NonEmptyString",
    "PersonalName",
    "PhoneNumber",
    "Postal",
    "PostalAddress",
    "PostalContactInfo",
    "PostalOnly",
    "StateCode",
    "WorkPhone",
    "ZipCode",
    "contact",
    "contact_from_email",
    "contact_from_postal",
    "mark_email_verified",
    "mark_postal_validated",
    "methods",
    "with_email_address",
    "with_postal_address",
    "wrappers",
]

import contextlib

with contextlib.suppress(ImportError):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from . import domain, errors, importing, reporting
from .domain import (
    Both,
    Contact,
    ContactInfo,
    EmailAddress,
    EmailContactInfo,
    EmailOnly,
    PersonalName,
    PostalAddress,
    PostalContactInfo,
    PostalOnly,
    StateCode,
    ZipCode,
    contact_from_email,
    with_postal_address,
)
from .errors import ReasonCode, ValidationError

__all__: list[str] = [
    "Both",
    "Contact",
    "ContactInfo",
    "EmailAddress",
    "EmailContactInfo",
    "EmailOnly",
    "PersonalName",
    "PostalAddress",
    "PostalContactInfo",
    "PostalOnly",
    "ReasonCode",
    "StateCode",
    "ValidationError",
    "ZipCode",
    "contact_from_email",
    "domain",
    "errors",
    "importing",
    "reporting",
    "with_postal_address",
]

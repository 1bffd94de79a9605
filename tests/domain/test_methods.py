from returns.result import Failure, Success

from contactkit.domain.contact import Both, Contact, EmailContactInfo, PostalContactInfo, contact_from_email
from contactkit.domain.methods import (
    ContactProfile,
    Email,
    HomePhone,
    Postal,
    WorkPhone,
    contact_methods,
)
from contactkit.domain.wrappers import EmailAddress, PersonalName, PhoneNumber
from contactkit.errors import ReasonCode


def test_contact_methods_flattens_each_variant(john: PersonalName, portland_postal: PostalContactInfo) -> None:
    email = EmailContactInfo(EmailAddress.create("smith@gmail.com").unwrap())
    assert contact_methods(Contact(john, Both(email, portland_postal)).info) == (
        Email(email),
        Postal(portland_postal),
    )
    assert contact_methods(contact_from_email(john, "smith@gmail.com").unwrap().info) == (Email(email),)


def test_profile_requires_at_least_one_method(john: PersonalName) -> None:
    res = ContactProfile.from_methods(john, [])
    assert isinstance(res, Failure)
    assert res.failure().reason is ReasonCode.NO_CONTACT_METHODS


def test_profile_first_method_is_primary(john: PersonalName) -> None:
    home = HomePhone(PhoneNumber.create("602-675-2313").unwrap())
    work = WorkPhone(PhoneNumber.create("602-675-8900").unwrap())

    res = ContactProfile.from_methods(john, [home, work])

    assert isinstance(res, Success)
    profile = res.unwrap()
    assert profile.primary == home
    assert profile.secondary == (work,)
    assert profile.methods == (home, work)


def test_profile_from_contact_and_with_method(john: PersonalName, portland_postal: PostalContactInfo) -> None:
    contact = contact_from_email(john, "smith@gmail.com").unwrap()
    profile = ContactProfile.from_contact(contact)
    assert isinstance(profile.primary, Email)
    assert profile.secondary == ()

    work = WorkPhone(PhoneNumber.create("602-675-8900").unwrap())
    extended = profile.with_method(work)
    assert extended.methods == (profile.primary, work)
    assert profile.secondary == ()

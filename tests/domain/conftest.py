import pytest

from contactkit.domain.contact import PostalAddress, PostalContactInfo
from contactkit.domain.wrappers import PersonalName


@pytest.fixture
def john() -> PersonalName:
    return PersonalName.create("John", "Smith").unwrap()


@pytest.fixture
def portland_postal() -> PostalContactInfo:
    address = PostalAddress.create("1 Main St", "", "Portland", "or", "97210").unwrap()
    return PostalContactInfo(address)


@pytest.fixture
def phoenix_postal() -> PostalContactInfo:
    address = PostalAddress.create("200 Van Buren St", "Suite 4", "Phoenix", "AZ", "85004").unwrap()
    return PostalContactInfo(address)

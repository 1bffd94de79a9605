from contactkit.errors import ReasonCode, ValidationError


def test_message_and_str_include_reason_and_input() -> None:
    err = ValidationError(ReasonCode.INVALID_ZIP_LENGTH, "9721")
    assert err.message == "zip code must be 5 digits"
    assert str(err) == "zip code must be 5 digits: '9721'"


def test_for_field_keeps_the_most_specific_field() -> None:
    err = ValidationError(ReasonCode.EMPTY_STRING, "")
    tagged = err.for_field("first_name")
    assert tagged.field == "first_name"
    assert tagged.for_field("name") is tagged
    assert tagged.message.startswith("first_name: ")
    assert err.field is None


def test_detail_is_appended_to_message() -> None:
    err = ValidationError(ReasonCode.MALFORMED_RECORD, "{}", detail="first_name: Field required")
    assert "(first_name: Field required)" in err.message


def test_every_reason_has_a_message() -> None:
    for reason in ReasonCode:
        assert ValidationError(reason, "x").message

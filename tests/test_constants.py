from oas_validator import constants


def test_ignore_regex_matches_polymorphic_and_validation():
    poly = constants.IGNORE_REGEX.match("anyOf failed")
    assert poly.group(1) == "anyOf"
    validation = constants.IGNORE_REGEX.match("validation failed")
    assert validation.group(1) == "validation"
    assert constants.IGNORE_REGEX.match("got number, want boolean") is None


def test_ignore_regex_requires_prefix():
    assert constants.IGNORE_REGEX.match("the anyOf failed") is None
    assert constants.IGNORE_REGEX.match("allOf failed here").group(0) == "allOf failed"


def test_ignore_poly_regex_excludes_validation():
    poly = constants.IGNORE_POLY_REGEX.match("oneOf failed")
    assert poly.group(1) == "oneOf"
    assert constants.IGNORE_POLY_REGEX.match("validation failed") is None
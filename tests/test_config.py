from oas_validator.config import (
    ValidationOptions,
    new_validation_options,
    with_content_assertions,
    with_format_assertions,
    with_regex_engine,
)


def test_defaults():
    opts = new_validation_options()
    assert opts.format_assertions is False
    assert opts.content_assertions is False
    assert opts.regex_engine is None


def test_options_applied():
    opts = new_validation_options(with_format_assertions(), with_content_assertions())
    assert opts.format_assertions is True
    assert opts.content_assertions is True


def test_none_options_are_skipped():
    opts = new_validation_options(None, with_format_assertions(), None)
    assert opts == ValidationOptions(format_assertions=True)


def test_regex_engine():
    def engine(pattern):
        return pattern

    opts = new_validation_options(with_regex_engine(engine))
    assert opts.regex_engine is engine
    assert opts.format_assertions is False
import pytest
from pydantic import ValidationError

from tinylinks.core.config import Settings


def test_code_settings_defaults():
    settings = Settings(DATABASE_URL="sqlite://")
    assert settings.CODE_LENGTH == 6
    assert settings.CODE_MAX_ATTEMPTS == 10


@pytest.mark.parametrize("length", [6, 7, 8])
def test_code_length_within_pattern(length):
    assert Settings(DATABASE_URL="sqlite://", CODE_LENGTH=length).CODE_LENGTH == length


@pytest.mark.parametrize("length", [0, 5, 9, 32])
def test_code_length_outside_pattern_rejected(length):
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="sqlite://", CODE_LENGTH=length)


def test_code_max_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="sqlite://", CODE_MAX_ATTEMPTS=0)

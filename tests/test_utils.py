import pytest

from dirops.exceptions import InvalidModeError
from dirops.utils import env_parse_bool, parse_mode


@pytest.mark.parametrize(
    "value, expected",
    [
        (0o755, 0o755),
        ("755", 0o755),
        ("0755", 0o755),
        ("0o700", 0o700),
        (" 0O644 ", 0o644),
        (0, 0),
    ],
)
def test_parse_mode(value, expected):
    assert parse_mode(value) == expected


@pytest.mark.parametrize("value", ["", "8", "0x1ff", "-1", 0o10000, -1, True, 7.5])
def test_parse_mode_invalid(value):
    with pytest.raises(InvalidModeError):
        parse_mode(value)


def test_invalid_mode_is_value_error():
    with pytest.raises(ValueError):
        parse_mode("nope")


@pytest.mark.parametrize("env_value, expected", [("1", True), ("true", True), ("TRUE", True), ("0", False), ("no", False)])
def test_env_parse_bool(monkeypatch, env_value, expected):
    monkeypatch.setenv("DIROPS_TEST_FLAG", env_value)
    assert env_parse_bool("DIROPS_TEST_FLAG") is expected


def test_env_parse_bool_default(monkeypatch):
    monkeypatch.delenv("DIROPS_TEST_FLAG", raising=False)
    assert env_parse_bool("DIROPS_TEST_FLAG") is False
    assert env_parse_bool("DIROPS_TEST_FLAG", True) is True

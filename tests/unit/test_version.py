import pytest

from versync.core.exceptions import InvalidVersionError
from versync.core.version import is_valid_version, validate_version


@pytest.mark.parametrize("value", ["0.0.0", "1.2.3", "10.20.30", "0.2.0", "001.02.3"])
def test_valid_versions(value):
    assert is_valid_version(value)
    assert validate_version(value) == value


@pytest.mark.parametrize(
    "value",
    [None, "", "abc", "1.2", "1", "1.2.3.4", "1.2.3-beta.1", "1.2.3+build", "v1.2.3", " 1.2.3", "1.2.3\n", "1..3", "a.b.c", "１.２.３", "١.٢.٣"],
)
def test_invalid_versions(value):
    assert not is_valid_version(value)
    with pytest.raises(InvalidVersionError) as excinfo:
        validate_version(value)
    assert excinfo.value.value == value


def test_invalid_version_is_a_value_error():
    with pytest.raises(ValueError, match="MAJOR.MINOR.PATCH"):
        validate_version("1.2")

import pytest

from minisoccer.passwords import check_password_hash, hash_password

PASSWORD = "password"


@pytest.fixture(scope="module")
def hashed():
    password = PASSWORD
    return hash_password(password)


def test_hash_uses_cost_twelve(hashed):
    assert hashed.startswith("$2a$12$")
    assert len(hashed) == 60


def test_hash_verifies(hashed):
    password = PASSWORD
    assert check_password_hash(password, hashed) is True


def test_wrong_password_rejected(hashed):
    password = "secret"
    assert check_password_hash(password, hashed) is False


def test_hash_is_not_the_plain_password(hashed):
    assert PASSWORD not in hashed


def test_hashes_are_salted(hashed):
    password = PASSWORD
    again = hash_password(password)
    assert again != hashed
    assert check_password_hash(password, again) is True


def test_malformed_hash_rejected():
    password = PASSWORD
    assert check_password_hash(password, "placeholder") is False
    assert check_password_hash(password, "") is False


def test_too_long_password_raises():
    too_long = PASSWORD + "x" * 70
    with pytest.raises(ValueError):
        hash_password(too_long)


def test_too_long_password_never_matches(hashed):
    too_long = PASSWORD + "x" * 70
    assert check_password_hash(too_long, hashed) is False
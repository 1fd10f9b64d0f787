from src.api.utils.password import check_password, hash_password


def test_hash_is_salted_and_verifiable():
    first = hash_password("SecurePass123!")
    second = hash_password("SecurePass123!")

    assert first != second
    assert check_password("SecurePass123!", first)
    assert check_password("SecurePass123!", second)


def test_wrong_password_returns_false():
    assert check_password("nope", hash_password("SecurePass123!")) is False


def test_malformed_hash_returns_false():
    assert check_password("SecurePass123!", "not-a-bcrypt-hash") is False

from functools import lru_cache

import bcrypt

from config import ApplicationConfig


def hash_password(password: str) -> str:
    """One-way salted bcrypt hash"""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison; a malformed hash counts as a mismatch"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


def burn_password_check() -> None:
    """Spend the same time as a real check when the user does not exist"""
    bcrypt.checkpw(b"not_the_password", _dummy_hash())

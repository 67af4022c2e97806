import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def md5_hash():
    """MD5 of 'hello'."""
    return "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture
def sha256_hash():
    """SHA-256 of 'hello'."""
    return "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


@pytest.fixture
def bcrypt_hash():
    return "$2b$12$" + "KIXQJbnKq4y2dBGOVzTtQe" + "T6RuIeeQXRl5T6f1h5LbNfRzjgMZEHe"

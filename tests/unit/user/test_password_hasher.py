"""Tests for bcrypt password hashing."""

import pytest

from holoauth.core.modules.user.password import PasswordHasher
from holoauth.errors import HashingError


class TestPasswordHasher:
    """Tests for hashing and verifying passwords."""

    @pytest.fixture(autouse=True)
    def setup(self):
        """Set up a low-cost hasher for all tests in this class."""
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self):
        """Test that the digest is a bcrypt hash, not the password."""
        digest = self.hasher.hash("Demo123")
        assert digest != "Demo123"
        assert digest.startswith("$2b$04$")

    def test_hash_is_salted(self):
        """Test that hashing the same password twice gives different digests."""
        assert self.hasher.hash("Demo123") != self.hasher.hash("Demo123")

    def test_verify_correct_password(self):
        """Test that a password verifies against its own digest."""
        assert self.hasher.verify(self.hasher.hash("Demo123"), "Demo123")

    @pytest.mark.parametrize("other", ["demo123", "Demo1234", "", "Demo12", " Demo123"])
    def test_verify_other_password(self, other):
        """Test that any other password is rejected."""
        assert self.hasher.verify(self.hasher.hash("Demo123"), other) is False

    def test_verify_malformed_hash_returns_false(self):
        """Test that a malformed digest yields False instead of raising."""
        assert self.hasher.verify("not-a-bcrypt-hash", "Demo123") is False

    def test_unicode_password(self):
        """Test that non-ASCII passwords round-trip."""
        digest = self.hasher.hash("Пароль123ü")
        assert self.hasher.verify(digest, "Пароль123ü")

    def test_password_of_exactly_72_bytes(self):
        """Test that the longest hashable password round-trips."""
        password = "A1b" + "x" * 69
        digest = self.hasher.hash(password)
        assert self.hasher.verify(digest, password)
        assert self.hasher.verify(digest, password[:-1] + "y") is False

    def test_password_over_72_bytes_cannot_be_hashed(self):
        """Test that passwords longer than 72 bytes raise HashingError."""
        with pytest.raises(HashingError, match="72 bytes"):
            self.hasher.hash("A1b" + "x" * 70)

    def test_multibyte_password_over_72_bytes_cannot_be_hashed(self):
        """Test that the limit counts UTF-8 bytes, not characters."""
        with pytest.raises(HashingError):
            self.hasher.hash("ü" * 37)

    def test_distinct_long_passwords_do_not_verify(self):
        """Test that passwords sharing their first 72 bytes are not interchangeable."""
        prefix = "A1b" + "x" * 69
        digest = self.hasher.hash(prefix)
        assert self.hasher.verify(digest, prefix + "first") is False
        assert self.hasher.verify(digest, prefix + "second") is False

    def test_invalid_rounds_raise_hashing_error(self):
        """Test that bcrypt failures surface as HashingError."""
        with pytest.raises(HashingError):
            PasswordHasher(rounds=2).hash("Demo123")

"""
Tests for bcrypt password hashing.
"""

import pytest

from auth.password import PasswordHasher


class TestPasswordHasher:
    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self):
        digest = self.hasher.hash("pw123456")
        assert digest != "pw123456"
        assert digest.startswith("$2")

    def test_hash_is_salted(self):
        assert self.hasher.hash("pw123456") != self.hasher.hash("pw123456")

    def test_work_factor_is_tunable(self):
        assert "$04$" in PasswordHasher(rounds=4).hash("x")
        assert "$05$" in PasswordHasher(rounds=5).hash("x")

    def test_verify_roundtrip(self):
        digest = self.hasher.hash("pw123456")
        assert self.hasher.verify("pw123456", digest) is True
        assert self.hasher.verify("wrong", digest) is False

    @pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$04$short"])
    def test_malformed_digest_is_a_mismatch(self, digest):
        assert self.hasher.verify("pw123456", digest) is False

    def test_truncated_digest_is_a_mismatch(self):
        digest = self.hasher.hash("pw123456")
        assert self.hasher.verify("pw123456", digest[:-10]) is False

    def test_verify_dummy_never_matches(self):
        assert self.hasher.verify_dummy("dummy-password") is False

import pytest

from scrambleverse.paseto import KeyPair, PysetoCodec, TokenCodecError


class TestKeyGeneration:
    def setup_method(self):
        self.codec = PysetoCodec()

    def test_local_key(self):
        key = self.codec.generate_local_key()
        assert key.startswith("k4.local.")

    def test_local_keys_are_random(self):
        assert self.codec.generate_local_key() != self.codec.generate_local_key()

    def test_key_pair(self):
        pair = self.codec.generate_public_key_pair()
        assert isinstance(pair, KeyPair)
        assert pair.secret_key.startswith("k4.secret.")
        assert pair.public_key.startswith("k4.public.")


class TestLocalTokens:
    def setup_method(self):
        self.codec = PysetoCodec()
        self.key = self.codec.generate_local_key()

    @pytest.mark.parametrize(
        "payload",
        [
            {"data": "test"},
            {"nested": {"list": [1, 2.5, None, True]}, "text": "héllo"},
            [1, "two"],
            "just a string",
        ],
    )
    def test_round_trip(self, payload):
        token = self.codec.encrypt(self.key, payload)
        assert token.startswith("v4.local.")
        assert self.codec.decrypt(self.key, token) == payload

    def test_footer_is_attached(self):
        token = self.codec.encrypt(self.key, {"a": 1}, footer='{"kid":"key1"}')
        assert token.count(".") == 3
        assert self.codec.decrypt(self.key, token) == {"a": 1}

    def test_assertion_must_match(self):
        token = self.codec.encrypt(self.key, {"a": 1}, assertion='{"aud":"example"}')

        assert self.codec.decrypt(self.key, token, assertion='{"aud":"example"}') == {
            "a": 1
        }
        with pytest.raises(TokenCodecError):
            self.codec.decrypt(self.key, token, assertion='{"aud":"other"}')
        with pytest.raises(TokenCodecError):
            self.codec.decrypt(self.key, token)

    def test_wrong_key(self):
        token = self.codec.encrypt(self.key, {"a": 1})
        with pytest.raises(TokenCodecError):
            self.codec.decrypt(self.codec.generate_local_key(), token)

    def test_malformed_token(self):
        with pytest.raises(TokenCodecError):
            self.codec.decrypt(self.key, "v4.local.not-a-token")

    def test_non_finite_payload_is_rejected(self):
        with pytest.raises(TokenCodecError):
            self.codec.encrypt(self.key, {"a": float("inf")})

    def test_wrong_key_type(self):
        pair = self.codec.generate_public_key_pair()
        with pytest.raises(TokenCodecError, match="k4.local"):
            self.codec.encrypt(pair.secret_key, {"a": 1})


class TestPublicTokens:
    def setup_method(self):
        self.codec = PysetoCodec()
        self.pair = self.codec.generate_public_key_pair()

    def test_round_trip(self):
        token = self.codec.sign(self.pair.secret_key, {"data": "test"})
        assert token.startswith("v4.public.")
        assert self.codec.verify(self.pair.public_key, token) == {"data": "test"}

    def test_footer_and_assertion(self):
        token = self.codec.sign(
            self.pair.secret_key, {"data": "test"}, footer="kid-1", assertion="bound"
        )
        assert self.codec.verify(self.pair.public_key, token, assertion="bound") == {
            "data": "test"
        }
        with pytest.raises(TokenCodecError):
            self.codec.verify(self.pair.public_key, token, assertion="other")

    def test_other_public_key(self):
        token = self.codec.sign(self.pair.secret_key, {"data": "test"})
        other = self.codec.generate_public_key_pair()
        with pytest.raises(TokenCodecError):
            self.codec.verify(other.public_key, token)

    def test_verify_requires_public_key(self):
        token = self.codec.sign(self.pair.secret_key, {"data": "test"})
        with pytest.raises(TokenCodecError, match="k4.public"):
            self.codec.verify(self.pair.secret_key, token)

    def test_sign_requires_secret_key(self):
        with pytest.raises(TokenCodecError, match="k4.secret"):
            self.codec.sign(self.pair.public_key, {"data": "test"})

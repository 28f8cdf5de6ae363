"""
Unit tests for v1 request signing.
"""

import hashlib
import random
from unittest.mock import Mock
from urllib.parse import parse_qs

import pytest

from jwplatform import Signer
from jwplatform.signing import encode_params, normalize_params

FIXED_TIME = 1575813660


class TestSigner:
    """Test signature generation."""

    @pytest.fixture
    def rng(self):
        """Random source pinned to nonce 00001234."""
        rng = Mock(spec=random.Random)
        rng.randrange.return_value = 1234
        return rng

    @pytest.fixture
    def signer(self, rng):
        """Create signer with fixed clock and nonce."""
        return Signer("API_KEY", "API_SECRET", clock=lambda: FIXED_TIME, rng=rng)

    def test_generate_nonce_format(self):
        """Test nonce is 8 zero padded digits."""
        signer = Signer("API_KEY", "API_SECRET", rng=random.Random(7))

        for _ in range(50):
            nonce = signer.generate_nonce()
            assert len(nonce) == 8
            assert nonce.isdigit()

    def test_generate_nonce_zero_padded(self, signer):
        """Test small random values are padded."""
        assert signer.generate_nonce() == "00001234"

    def test_make_timestamp(self, signer):
        """Test timestamp is whole Unix seconds."""
        assert signer.make_timestamp() == str(FIXED_TIME)

    def test_sign_known_signature(self, signer):
        """Test signing reproduces the documented base string digest."""
        signed = signer.sign({"video_key": "VIDEO_KEY"})

        base = (
            "api_format=json&api_key=API_KEY&api_nonce=00001234"
            f"&api_timestamp={FIXED_TIME}&video_key=VIDEO_KEYAPI_SECRET"
        )
        expected = hashlib.sha1(base.encode('utf-8')).hexdigest()
        assert signed["api_signature"] == [expected]

    def test_sign_deterministic(self, signer):
        """Test same input, nonce and timestamp give the same signature."""
        first = signer.sign({"video_key": "VIDEO_KEY"})
        second = signer.sign({"video_key": "VIDEO_KEY"})

        assert first == second

    def test_sign_signature_is_lowercase_hex(self, signer):
        """Test signature is 40 lowercase hex chars."""
        signature = signer.sign()["api_signature"][0]

        assert len(signature) == 40
        assert signature == signature.lower()
        int(signature, 16)  # Should not raise

    def test_sign_injected_parameters(self, signer):
        """Test injected keys are present exactly once."""
        signed = signer.sign({"video_key": "VIDEO_KEY"})

        for key in ("api_nonce", "api_key", "api_format", "api_timestamp", "api_signature"):
            assert len(signed[key]) == 1
        assert signed["api_format"] == ["json"]
        assert signed["api_key"] == ["API_KEY"]
        assert signed["video_key"] == ["VIDEO_KEY"]

    def test_sign_overwrites_caller_values(self, signer):
        """Test caller-supplied values for injected keys are replaced."""
        signed = signer.sign({"api_format": "xml", "api_key": "OTHER", "api_nonce": ["1", "2"]})

        assert signed["api_format"] == ["json"]
        assert signed["api_key"] == ["API_KEY"]
        assert signed["api_nonce"] == ["00001234"]

    def test_sign_caller_signature_is_signed_then_replaced(self, signer):
        """Test a caller api_signature enters the digest before being overwritten."""
        signed = signer.sign({"api_signature": "x"})

        base = (
            "api_format=json&api_key=API_KEY&api_nonce=00001234"
            f"&api_signature=x&api_timestamp={FIXED_TIME}API_SECRET"
        )
        assert signed["api_signature"] != ["x"]
        assert signed["api_signature"] == [hashlib.sha1(base.encode('utf-8')).hexdigest()]

    def test_sign_empty_params(self, signer):
        """Test signing with no caller parameters."""
        signed = signer.sign(None)

        assert set(signed) == {
            "api_nonce", "api_key", "api_format", "api_timestamp", "api_signature"
        }

    def test_sign_does_not_mutate_input(self, signer):
        """Test caller parameters are left untouched."""
        params = {"video_key": "VIDEO_KEY"}
        signer.sign(params)

        assert params == {"video_key": "VIDEO_KEY"}

    def test_sign_changes_with_any_value(self, signer):
        """Test changing a single value changes the signature."""
        base = signer.sign({"video_key": "VIDEO_KEY", "title": "a"})["api_signature"]
        other_value = signer.sign({"video_key": "VIDEO_KEX", "title": "a"})["api_signature"]
        other_title = signer.sign({"video_key": "VIDEO_KEY", "title": "b"})["api_signature"]

        assert len({base[0], other_value[0], other_title[0]}) == 3

    def test_sign_changes_with_secret(self, rng):
        """Test a different secret gives a different signature."""
        one = Signer("API_KEY", "SECRET_ONE", clock=lambda: FIXED_TIME, rng=rng)
        two = Signer("API_KEY", "SECRET_TWO", clock=lambda: FIXED_TIME, rng=rng)

        assert one.sign()["api_signature"] != two.sign()["api_signature"]

    def test_sign_changes_with_nonce(self):
        """Test fresh nonces give fresh signatures."""
        signer = Signer("API_KEY", "API_SECRET", clock=lambda: FIXED_TIME, rng=random.Random(1))

        signatures = {signer.sign()["api_signature"][0] for _ in range(5)}
        assert len(signatures) > 1

    def test_base_string_sorted_keys(self, signer):
        """Test keys are sorted and joined with &, secret appended raw."""
        base = signer.base_string({"b": ["2"], "a": ["1"], "c": ["3"]})

        assert base == "a=1&b=2&c=3API_SECRET"

    def test_base_string_repeated_values(self, signer):
        """Test repeated values of one key follow each other without separator."""
        base = signer.base_string({"tag": ["x", "y"], "title": ["t"]})

        assert base == "tag=xtag=y&title=tAPI_SECRET"

    def test_base_string_empty(self, signer):
        """Test empty parameter set is just the secret."""
        assert signer.base_string({}) == "API_SECRET"

    def test_signed_params_round_trip(self, signer):
        """Test encoding then parsing yields the same parameters."""
        signed = signer.sign({"title": "My video & more", "tags": ["a b", "c"]})

        parsed = parse_qs(encode_params(signed))
        assert parsed == signed


class TestParams:
    """Test parameter normalization and encoding."""

    def test_normalize_none(self):
        assert normalize_params(None) == {}

    def test_normalize_mapping(self):
        assert normalize_params({"a": "1", "b": ["2", "3"], "n": 5}) == {
            "a": ["1"], "b": ["2", "3"], "n": ["5"]
        }

    def test_normalize_pairs(self):
        assert normalize_params([("tag", "x"), ("tag", "y")]) == {"tag": ["x", "y"]}

    def test_encode_sorted(self):
        assert encode_params({"b": ["2"], "a": ["1", "3"]}) == "a=1&a=3&b=2"

"""Tests for webhook signature computation and verification."""

import hashlib
import hmac

import pytest

from laneful.webhooks import (
    WebhookSigner,
    compute_webhook_signature,
    generate_webhook_secret,
    verify_webhook_signature,
)

SECRET = "whsec_test_secret"
PAYLOAD = '{"event":"delivered","email":"ada@example.com","timestamp":1735689600}'


@pytest.fixture
def valid_signature():
    return hmac.new(SECRET.encode(), PAYLOAD.encode(), hashlib.sha256).hexdigest()


class TestComputeSignature:
    def test_matches_hmac_sha256_hex(self, valid_signature):
        assert compute_webhook_signature(SECRET, PAYLOAD) == valid_signature

    def test_is_lowercase_hex(self):
        signature = compute_webhook_signature(SECRET, PAYLOAD)
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)

    def test_known_vector(self):
        # RFC 4231 test case 2
        assert compute_webhook_signature("Jefe", "what do ya want for nothing?") == (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        )

    def test_bytes_and_str_payloads_agree(self):
        assert compute_webhook_signature(SECRET, PAYLOAD.encode("utf-8")) == (
            compute_webhook_signature(SECRET, PAYLOAD)
        )


class TestVerifySignature:
    def test_valid_signature(self, valid_signature):
        assert verify_webhook_signature(SECRET, PAYLOAD, valid_signature) is True

    def test_every_single_character_mutation_is_rejected(self, valid_signature):
        for i, char in enumerate(valid_signature):
            replacement = "0" if char != "0" else "1"
            mutated = valid_signature[:i] + replacement + valid_signature[i + 1:]
            assert verify_webhook_signature(SECRET, PAYLOAD, mutated) is False

    def test_uppercase_signature_is_rejected(self, valid_signature):
        assert verify_webhook_signature(SECRET, PAYLOAD, valid_signature.upper()) is False

    @pytest.mark.parametrize("length_change", [-1, 1, -64])
    def test_length_mismatch_returns_false(self, valid_signature, length_change):
        if length_change < 0:
            signature = valid_signature[:length_change]
        else:
            signature = valid_signature + "0"
        assert verify_webhook_signature(SECRET, PAYLOAD, signature) is False

    def test_non_ascii_signature_returns_false(self):
        assert verify_webhook_signature(SECRET, PAYLOAD, "é" * 64) is False

    @pytest.mark.parametrize("signature", [None, 0, ["abc"]])
    def test_missing_signature_returns_false(self, signature):
        assert verify_webhook_signature(SECRET, PAYLOAD, signature) is False

    def test_wrong_secret(self, valid_signature):
        assert verify_webhook_signature("other", PAYLOAD, valid_signature) is False

    def test_tampered_payload(self, valid_signature):
        assert verify_webhook_signature(SECRET, PAYLOAD + " ", valid_signature) is False


class TestWebhookSigner:
    def test_sign_and_verify(self):
        signer = WebhookSigner(SECRET)
        signature = signer.sign(PAYLOAD)
        assert signer.verify(PAYLOAD, signature)
        assert not signer.verify(PAYLOAD, signature[:-1])

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            WebhookSigner("")

    def test_generated_secrets_are_unique(self):
        first, second = generate_webhook_secret(), generate_webhook_secret()
        assert first != second
        assert len(first) >= 32

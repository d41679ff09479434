import unittest
from datetime import datetime, timedelta, timezone

import jwt

from themevote.domain import VerificationFailure
from themevote.infrastructure.auth import JwksCredentialVerifier, jwks_url_for

SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_token(claims: dict, secret: str = SECRET) -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


class JwksCredentialVerifierTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.resolved: list[str] = []

        def resolve(token: str) -> str:
            self.resolved.append(token)
            return SECRET

        self.verifier = JwksCredentialVerifier(
            "https://auth.invalid/jwks.json",
            algorithms=["HS256"],
            key_resolver=resolve,
        )
        self.expiry = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(hours=1)

    async def test_returns_subject_and_expiry(self):
        token = make_token({"sub": "user-1", "exp": int(self.expiry.timestamp())})

        credential = await self.verifier.verify(token)

        self.assertEqual(credential.subject, "user-1")
        self.assertEqual(credential.expiry, self.expiry)
        self.assertEqual(self.resolved, [token])

    async def test_expired_token_is_decoded_but_marked_expired(self):
        past = datetime.now(timezone.utc) - timedelta(minutes=5)
        token = make_token({"sub": "user-1", "exp": int(past.timestamp())})

        credential = await self.verifier.verify(token)

        self.assertTrue(credential.is_expired())

    async def test_bad_signature_fails(self):
        token = make_token({"sub": "user-1", "exp": int(self.expiry.timestamp())}, secret="another-secret-key-of-decent-length!!")

        with self.assertRaises(VerificationFailure):
            await self.verifier.verify(token)

    async def test_missing_subject_fails(self):
        token = make_token({"exp": int(self.expiry.timestamp())})

        with self.assertRaises(VerificationFailure):
            await self.verifier.verify(token)

    async def test_garbage_fails(self):
        with self.assertRaises(VerificationFailure):
            await self.verifier.verify("not-a-jwt")

    async def test_audience_checked_when_configured(self):
        verifier = JwksCredentialVerifier(
            "https://auth.invalid/jwks.json",
            algorithms=["HS256"],
            audience="authenticated",
            key_resolver=lambda token: SECRET,
        )
        good = make_token({"sub": "u", "exp": int(self.expiry.timestamp()), "aud": "authenticated"})
        bad = make_token({"sub": "u", "exp": int(self.expiry.timestamp()), "aud": "anon"})

        self.assertEqual((await verifier.verify(good)).subject, "u")
        with self.assertRaises(VerificationFailure):
            await verifier.verify(bad)

    def test_jwks_url_for_provider(self):
        self.assertEqual(
            jwks_url_for("https://example.supabase.co/"),
            "https://example.supabase.co/auth/v1/.well-known/jwks.json",
        )

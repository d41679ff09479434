from .jwks import DEFAULT_ALGORITHMS, JwksCredentialVerifier, jwks_url_for

__all__ = ["DEFAULT_ALGORITHMS", "JwksCredentialVerifier", "jwks_url_for"]

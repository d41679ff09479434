from __future__ import annotations


class AuthError(Exception):
    """Base class for failures of the browser login handshake."""


class AuthTimeout(AuthError):
    def __init__(self, timeout: float):
        super().__init__(f"Authentication timeout ({timeout:g} seconds)")
        self.timeout = timeout


class ProviderError(AuthError):
    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class TransportError(AuthError):
    pass


class VoteError(ValueError):
    pass


class InvalidVoteType(VoteError):
    def __init__(self, vote_type: object):
        super().__init__("Invalid vote type")
        self.vote_type = vote_type


class UnknownTheme(VoteError):
    def __init__(self, theme_id: int):
        super().__init__("Theme not found")
        self.theme_id = theme_id


class MissingCredential(Exception):
    pass


class VerificationFailure(Exception):
    pass

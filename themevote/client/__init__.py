from .api import ApiError, VotingApiClient
from .callback import CallbackCapture, CallbackPages
from .handshake import AuthHandshake, HandshakeSettings, build_authorize_url
from .token_cell import CallbackOutcome, TokenCell

__all__ = [
    "ApiError",
    "VotingApiClient",
    "CallbackCapture",
    "CallbackPages",
    "AuthHandshake",
    "HandshakeSettings",
    "build_authorize_url",
    "CallbackOutcome",
    "TokenCell",
]

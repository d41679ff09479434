from .models import (
    ExportedVote,
    Theme,
    ThemeResponse,
    ThemeStats,
    VerifiedCredential,
    Vote,
    VoteType,
)
from .errors import (
    AuthError,
    AuthTimeout,
    InvalidVoteType,
    MissingCredential,
    ProviderError,
    TransportError,
    UnknownTheme,
    VerificationFailure,
    VoteError,
)
from .repositories import (
    CredentialVerifier,
    Randomizer,
    ResultsRepository,
    ThemesRepository,
    VotesRepository,
)
from .themes import ThemeSelector
from .votes import VoteRecorder, parse_vote_type

__all__ = [
    "Theme",
    "Vote",
    "VoteType",
    "ThemeResponse",
    "ThemeStats",
    "ExportedVote",
    "VerifiedCredential",
    "AuthError",
    "AuthTimeout",
    "ProviderError",
    "TransportError",
    "VoteError",
    "InvalidVoteType",
    "UnknownTheme",
    "MissingCredential",
    "VerificationFailure",
    "ThemesRepository",
    "VotesRepository",
    "ResultsRepository",
    "Randomizer",
    "CredentialVerifier",
    "ThemeSelector",
    "VoteRecorder",
    "parse_vote_type",
]

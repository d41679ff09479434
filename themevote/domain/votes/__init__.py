from .recorder import VoteRecorder, parse_vote_type

__all__ = ["VoteRecorder", "parse_vote_type"]

from .results import ResultsQueryService, exported_vote_to_dict, theme_stats_to_dict

__all__ = ["ResultsQueryService", "exported_vote_to_dict", "theme_stats_to_dict"]

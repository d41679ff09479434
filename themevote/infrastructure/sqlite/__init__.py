from .database import SQLiteDatabase
from .themes import SQLiteThemesRepository
from .votes import SQLiteVotesRepository
from .results import SQLiteResultsRepository

__all__ = [
    "SQLiteDatabase",
    "SQLiteThemesRepository",
    "SQLiteVotesRepository",
    "SQLiteResultsRepository",
]

from .themes_loader import LoadReport, load_themes_from_file, sync_themes

__all__ = ["LoadReport", "load_themes_from_file", "sync_themes"]

from .selector import ThemeSelector

__all__ = ["ThemeSelector"]

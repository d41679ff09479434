from .randomizer import SystemRandomizer

__all__ = ["SystemRandomizer"]

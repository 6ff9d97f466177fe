from .stop_words import STOP_WORDS

__all__ = ["STOP_WORDS"]

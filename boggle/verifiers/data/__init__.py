"""Word list lookup for validating submitted words."""

from .words import Dictionary, DEFAULT_WORDS

__all__ = ["Dictionary", "DEFAULT_WORDS"]

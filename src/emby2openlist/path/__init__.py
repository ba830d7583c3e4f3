"""Emby to Openlist path translation."""

from emby2openlist.path.translator import (
    PathRange,
    PathTranslator,
    SymlinkOutcome,
    TranslationResult,
    split_from_second_slash,
)

__all__ = [
    "PathRange",
    "PathTranslator",
    "SymlinkOutcome",
    "TranslationResult",
    "split_from_second_slash",
]

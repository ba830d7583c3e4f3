"""Exceptions raised by emby2openlist."""

from enum import Enum


class Emby2OpenlistError(Exception):
    """Base exception for emby2openlist errors."""

    pass


class SymlinkErrorKind(Enum):
    """Why a local symlink could not be resolved."""

    CYCLIC = "cyclic"
    TARGET_MISSING = "target_missing"
    OTHER = "other"


class SymlinkResolutionError(Emby2OpenlistError):
    """A local path could not be canonicalized."""

    def __init__(self, kind: SymlinkErrorKind, path: str, cause: Exception):
        self.kind = kind
        self.path = path
        self.cause = cause
        super().__init__(f"Symlink resolution failed ({kind.value}) for {path}: {cause}")


class SplitErrorKind(Enum):
    """Why a path could not be split at its second slash."""

    NO_SEPARATOR = "no_separator"
    SINGLE_SEPARATOR_ONLY = "single_separator_only"


class SplitError(Emby2OpenlistError):
    """A path has fewer than two '/' separators."""

    def __init__(self, kind: SplitErrorKind, value: str):
        self.kind = kind
        self.value = value
        if kind is SplitErrorKind.NO_SEPARATOR:
            message = f"String contains no '/': {value}"
        else:
            message = f"String contains a single '/': {value}"
        super().__init__(message)


class PathRangeError(Emby2OpenlistError):
    """The Openlist path cannot be re-rooted for range enumeration."""

    def __init__(self, path: str, cause: SplitError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot parse Openlist path {path}: {cause}")


class ListingServiceError(Emby2OpenlistError):
    """The Openlist listing service reported a non-success status."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Openlist fs list request failed ({code}): {message}")

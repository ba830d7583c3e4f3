"""Translate Emby library paths into Openlist storage paths.

Pipeline steps:
1. URL decoding
2. Backslash to slash conversion
3. Local symlink resolution (optional)
4. Emby mount path removal
5. Explicit emby2openlist mapping

The result also carries a deferred range computation which re-roots the
translated path under every top-level directory Openlist reports. It is
useful when the first path segment names a storage root that does not match
the Openlist layout.
"""

import errno
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from emby2openlist.config import Config
from emby2openlist.exceptions import (
    ListingServiceError,
    PathRangeError,
    SplitError,
    SplitErrorKind,
    SymlinkErrorKind,
    SymlinkResolutionError,
)
from emby2openlist.openlist.client import OpenlistClient
from emby2openlist.utils.logger import get_logger
from emby2openlist.utils.urls import transfer_slash, unescape

logger = get_logger(__name__)

ROOT_PATH = "/"


@dataclass(frozen=True)
class SymlinkOutcome:
    """Result of resolving a local symlink.

    Exactly one of the states applies: unchanged (neither ``resolved`` nor
    ``error`` set), resolved to a new path, or failed with a classified error.
    """

    path: str
    resolved: bool = False
    error: Optional[SymlinkResolutionError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def normalize(path: str) -> Tuple[str, str]:
    """Decode URL escapes once, then unify separators.

    Returns:
        Tuple of (url decoded path, slash converted path)
    """
    decoded = unescape(path)
    return decoded, transfer_slash(decoded)


def resolve_local_symlink(path: str) -> SymlinkOutcome:
    """Resolve ``path`` to its canonical, symlink free form.

    Args:
        path: Local filesystem path

    Returns:
        SymlinkOutcome describing the resolution
    """
    if not path.strip():
        return SymlinkOutcome(path=path)

    try:
        resolved = os.path.realpath(path, strict=True)
    except FileNotFoundError as e:
        kind = SymlinkErrorKind.TARGET_MISSING
        return SymlinkOutcome(path=path, error=SymlinkResolutionError(kind, path, e))
    except OSError as e:
        if e.errno == errno.ELOOP:
            kind = SymlinkErrorKind.CYCLIC
        else:
            kind = SymlinkErrorKind.OTHER
        return SymlinkOutcome(path=path, error=SymlinkResolutionError(kind, path, e))
    except ValueError as e:
        # Paths with embedded NUL bytes cannot reach the OS
        kind = SymlinkErrorKind.OTHER
        return SymlinkOutcome(path=path, error=SymlinkResolutionError(kind, path, e))

    if resolved == path:
        return SymlinkOutcome(path=path)
    return SymlinkOutcome(path=resolved, resolved=True)


def strip_mount_path(path: str, mount_path: str) -> str:
    """Remove ``mount_path`` when it is a literal prefix of ``path``."""
    if mount_path and path.startswith(mount_path):
        return path[len(mount_path):]
    return path


def split_from_second_slash(value: str) -> str:
    """Return ``value`` from its second '/' (inclusive) to the end.

    Example:
        split_from_second_slash("/115/movie/a.mkv")
        # Returns: /movie/a.mkv

    Raises:
        SplitError: If ``value`` holds fewer than two '/' separators
    """
    value = transfer_slash(value)
    first = value.find("/")
    if first == -1:
        raise SplitError(SplitErrorKind.NO_SEPARATOR, value)

    second = value.find("/", first + 1)
    if second == -1:
        raise SplitError(SplitErrorKind.SINGLE_SEPARATOR_ONLY, value)

    return value[second:]


class PathRange:
    """Deferred enumeration of a path under every Openlist root directory.

    Nothing is cached: each ``evaluate()`` splits the path again and queries
    the listing service again.
    """

    def __init__(self, openlist_path: str, client: OpenlistClient):
        self.openlist_path = openlist_path
        self.client = client

    def evaluate(self) -> List[str]:
        """Build one candidate path per top-level Openlist directory.

        Returns:
            Candidate paths in listing order

        Raises:
            PathRangeError: If the path has fewer than two '/' separators
            ListingServiceError: If Openlist reports a non-success status
        """
        try:
            suffix = split_from_second_slash(self.openlist_path)
        except SplitError as e:
            raise PathRangeError(self.openlist_path, e) from e

        response = self.client.fetch_fs_list(ROOT_PATH, None)
        if not response.ok:
            raise ListingServiceError(response.code, response.message)

        return [f"/{entry.name}{suffix}" for entry in response.entries if entry.is_dir]

    __call__ = evaluate

    def __repr__(self) -> str:
        return f"PathRange({self.openlist_path!r})"


@dataclass
class TranslationResult:
    """Result of translating a single Emby path."""

    path: str
    range: PathRange
    success: bool = True


@dataclass
class _Routes:
    """Ordered trace of the value produced by each pipeline stage."""

    stages: List[dict] = field(default_factory=list)

    def add(self, stage: str, value: str) -> None:
        self.stages.append({"stage": stage, "value": value})


class PathTranslator:
    """Translate Emby media paths into Openlist paths."""

    def __init__(self, config: Config, client: OpenlistClient):
        """Initialize the translator.

        Args:
            config: Application configuration, treated as read-only
            client: Listing client used by range enumeration
        """
        self.config = config
        self.client = client

    def translate(self, emby_path: str) -> TranslationResult:
        """Translate an Emby path into its Openlist counterpart.

        Never fails: symlink errors are logged and skipped, and errors from
        range enumeration only surface when the range is evaluated.

        Args:
            emby_path: Absolute path as reported by Emby

        Returns:
            TranslationResult with the translated path and its range
        """
        routes = _Routes()
        routes.add("original", emby_path)

        decoded, path = normalize(emby_path)
        routes.add("url_decoded", decoded)
        routes.add("slash_converted", path)

        if self.config.path.follow_symlink:
            outcome = resolve_local_symlink(path)
            if outcome.failed:
                logger.warning(
                    "Failed to resolve symlink",
                    path=path,
                    kind=outcome.error.kind.value,
                    error=str(outcome.error.cause),
                )
            elif outcome.resolved:
                path = outcome.path
                routes.add("symlink_resolved", path)

        openlist_path = strip_mount_path(path, self.config.emby.mount_path)
        routes.add("mount_path_removed", openlist_path)

        mapped, hit = self.config.path.map_emby2openlist(openlist_path)
        if hit:
            openlist_path = mapped
            routes.add("mapping_hit", openlist_path)

        logger.info("Translated Emby path", routes=routes.stages)

        return TranslationResult(
            path=openlist_path,
            range=PathRange(openlist_path, self.client),
            success=True,
        )

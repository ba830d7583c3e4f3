"""Openlist fs list API client."""

from typing import Optional

import httpx
from pydantic import ValidationError

from emby2openlist.config import OpenlistConfig
from emby2openlist.openlist.models import FsListOptions, FsListResponse
from emby2openlist.utils.logger import get_logger

logger = get_logger(__name__)

TRANSPORT_ERROR_CODE = 500


class OpenlistClient:
    """Synchronous client for the Openlist listing service."""

    def __init__(self, config: OpenlistConfig, transport: Optional[httpx.BaseTransport] = None):
        """Initialize Openlist client.

        Args:
            config: Openlist connection settings
            transport: Optional httpx transport (used by tests)
        """
        headers = {}
        if config.token:
            headers["Authorization"] = config.token
        self.base_url = config.host
        self.client = httpx.Client(
            base_url=config.host,
            headers=headers,
            timeout=config.timeout_seconds,
            transport=transport,
        )
        logger.info("Initialized Openlist client", host=config.host)

    def close(self):
        """Close HTTP client."""
        self.client.close()

    def __enter__(self) -> "OpenlistClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_fs_list(self, path: str, options: Optional[FsListOptions] = None) -> FsListResponse:
        """List a directory on Openlist.

        Transport and decoding failures are folded into a non-success
        response so callers only have to check ``response.ok``.

        Args:
            path: Openlist directory to list
            options: Optional listing filters

        Returns:
            Parsed listing response
        """
        options = options or FsListOptions()
        body = {"path": path, **options.model_dump()}

        try:
            response = self.client.post("/api/fs/list", json=body)
            response.raise_for_status()
            result = FsListResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(
                "Openlist API error",
                path=path,
                status_code=e.response.status_code,
                error=str(e),
            )
            return FsListResponse(code=e.response.status_code, message=str(e))
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error("Openlist request failed", path=path, error=str(e))
            return FsListResponse(code=TRANSPORT_ERROR_CODE, message=str(e))

        logger.debug(
            "Fetched Openlist listing",
            path=path,
            code=result.code,
            entries=len(result.entries),
        )
        return result

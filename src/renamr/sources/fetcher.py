"""HTTP source provider with safe redirect handling."""

from __future__ import annotations

import logging

import httpx

from renamr.errors import SourceFetchError
from renamr.sources.validator import validate_link

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "renamr/1.0"


def _is_safe_redirect(current: httpx.URL, target: httpx.URL) -> bool:
    """Same scheme, or an http -> https upgrade. Never downgrade."""
    if target.scheme == current.scheme:
        return True
    return current.scheme == "http" and target.scheme == "https"


class SourceFetcher:
    """Fetches page bodies one link at a time.

    A fresh client is opened per fetch and closed once the body is read.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_redirects: int = 10,
        block_private: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.max_redirects = max_redirects
        self.block_private = block_private
        self._transport = transport

    def fetch(self, url: str) -> str:
        """Return the decoded body of url, following safe redirects."""
        try:
            validate_link(url, block_private=self.block_private)
        except ValueError as exc:
            raise SourceFetchError(url, str(exc)) from exc

        logger.info("Fetching %s", url)
        with httpx.Client(
            transport=self._transport,
            timeout=self.timeout,
            follow_redirects=False,
            headers={"User-Agent": self.user_agent},
        ) as client:
            current = httpx.URL(url)
            for _hop in range(self.max_redirects + 1):
                try:
                    response = client.get(current)
                except httpx.HTTPError as exc:
                    raise SourceFetchError(url, str(exc)) from exc

                if not response.is_redirect:
                    break

                target = current.join(response.headers["location"])
                if not _is_safe_redirect(current, target):
                    raise SourceFetchError(
                        url, f"unsafe redirect from {current} to {target}"
                    )
                try:
                    validate_link(str(target), block_private=self.block_private)
                except ValueError as exc:
                    raise SourceFetchError(url, str(exc)) from exc
                logger.debug("Redirect %s -> %s", current, target)
                current = target
            else:
                raise SourceFetchError(url, f"more than {self.max_redirects} redirects")

            if not response.is_success:
                raise SourceFetchError(
                    url, f"HTTP {response.status_code} {response.reason_phrase}"
                )
            return response.text

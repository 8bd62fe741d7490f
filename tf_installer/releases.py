"""Client for the remote release index used to resolve "latest"."""

from __future__ import annotations

import requests

from .errors import ReleaseIndexError


class ReleaseIndex:
    """Reads release records from a GitHub-style releases endpoint.

    Args:
        url: Endpoint returning a JSON array of release objects.
        timeout: Seconds to wait for the response.
    """

    def __init__(self, url: str, timeout: float = 30) -> None:
        self.url = url
        self.timeout = timeout

    def tags(self) -> list[str]:
        """Return the tag_name of every release, in the order served.

        Raises:
            ReleaseIndexError: On connection failures, non-2xx responses, or
                               a body that isn't a list of release objects.
        """
        try:
            res = requests.get(
                self.url,
                headers={"Accept": "application/vnd.github+json"},
                timeout=self.timeout,
            )
            res.raise_for_status()
            releases = res.json()
        except requests.RequestException as exc:
            raise ReleaseIndexError(f"Unable to query releases from {self.url}: {exc}") from exc
        except ValueError as exc:
            raise ReleaseIndexError(f"Invalid JSON from {self.url}: {exc}") from exc

        if not isinstance(releases, list):
            raise ReleaseIndexError(f"Unexpected response from {self.url}")
        return [r["tag_name"] for r in releases if isinstance(r, dict) and r.get("tag_name")]

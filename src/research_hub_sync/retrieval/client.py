"""Minimal Contentful Content Delivery API client."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .. import __version__
from ..errors import SourceError

USER_AGENT = f"research-hub-sync/{__version__}"


class ContentfulClient:
    """Thin wrapper around the entries endpoint of one space/environment."""

    def __init__(
        self,
        space_id: Optional[str],
        access_token: Optional[str],
        environment: str = "master",
        host: str = "cdn.contentful.com",
    ) -> None:
        self.space_id = space_id or ""
        self.environment = environment
        host = host.rstrip("/")
        self.base_url = host if "://" in host else f"https://{host}"
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
        if access_token:
            self.session.headers["Authorization"] = f"Bearer {access_token}"

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}/spaces/{self.space_id}/environments/{self.environment}{path}"

    def get_entries(self, skip: int = 0, limit: int = 100, content_type: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"skip": skip, "limit": limit}
        if content_type:
            params["content_type"] = content_type
        url = self._url("entries")
        response = self.session.get(url, params=params)
        if response.status_code >= 300:
            raise SourceError(f"GET {url} failed: {response.status_code} {response.text[:300]}")
        return response.json()


__all__ = ["ContentfulClient", "USER_AGENT"]

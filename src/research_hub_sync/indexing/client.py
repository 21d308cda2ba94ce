"""Minimal Elasticsearch client wrapper used by the sync."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from ..errors import DestinationError

DEFAULT_INDEX_BODY: Dict[str, Any] = {
    "settings": {"number_of_shards": 1, "number_of_replicas": 0},
    "mappings": {"dynamic": True},
}


class ESClient:
    """Thin wrapper around the Elasticsearch HTTP API for single-document writes."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str],
        password: Optional[str],
        api_key: Optional[str],
        verify_tls: bool = True,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.verify = bool(verify_tls)

        if api_key:
            self.session.headers["Authorization"] = f"ApiKey {api_key}"
        elif username and password:
            self.session.auth = (username, password)

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    @staticmethod
    def _check(response: requests.Response, action: str) -> None:
        if response.status_code >= 300:
            raise DestinationError(f"Failed to {action}: {response.status_code} {response.text[:300]}")

    @staticmethod
    def _acknowledged(response: requests.Response) -> bool:
        body = response.json()
        return isinstance(body, dict) and bool(body.get("acknowledged"))

    def health(self, timeout: Optional[float] = None) -> str:
        """Return the `_cat/health` line for the cluster."""

        response = self.session.get(self._url("_cat/health"), verify=self.verify, timeout=timeout)
        self._check(response, "read cluster health")
        return response.text

    def head_index(self, name: str) -> int:
        response = self.session.head(self._url(quote(name, safe="")), verify=self.verify)
        return response.status_code

    def index_exists(self, name: str) -> bool:
        status = self.head_index(name)
        if status == 404:
            return False
        if status >= 300:
            raise DestinationError(f"Failed to check index '{name}': {status}")
        return True

    def create_index(self, name: str, body: Optional[Mapping[str, Any]] = None) -> bool:
        """Create `name`; returns the acknowledgment flag."""

        payload = DEFAULT_INDEX_BODY if body is None else body
        response = self.session.put(
            self._url(quote(name, safe="")), data=json.dumps(payload), verify=self.verify
        )
        self._check(response, f"create index '{name}'")
        return self._acknowledged(response)

    def delete_index(self, name: str) -> bool:
        """Delete `name`; returns the acknowledgment flag."""

        response = self.session.delete(self._url(quote(name, safe="")), verify=self.verify)
        self._check(response, f"delete index '{name}'")
        return self._acknowledged(response)

    def upsert_document(self, index: str, doc_id: str, body: Mapping[str, Any]) -> Dict[str, Any]:
        """Create or replace the document `doc_id` in `index`."""

        path = f"{quote(index, safe='')}/_doc/{quote(str(doc_id), safe='')}"
        response = self.session.put(
            self._url(path),
            data=json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8"),
            verify=self.verify,
        )
        self._check(response, f"index document '{doc_id}' into '{index}'")
        return response.json()


__all__ = ["DEFAULT_INDEX_BODY", "ESClient"]

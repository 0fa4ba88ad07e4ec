from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass
class StoreConfig:
    url: str
    api_key: str
    schema: str = "public"
    timeout_seconds: float = 30.0


class StoreConnection:
    """Singleton-like store client factory.

    Note: We create a short-lived httpx client per operation, so one
    connection can be shared by code running on different event loops.
    """

    _instance: Optional["StoreConnection"] = None

    def __init__(self, config: StoreConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "StoreConnection":
        if cls._instance is None:
            cls._instance = StoreConnection(config)
        return cls._instance

    @property
    def base_url(self) -> str:
        return f"{self._config.url.rstrip('/')}/rest/v1"

    def headers(self) -> dict[str, str]:
        return {
            "apikey": self._config.api_key,
            "Authorization": f"Bearer {self._config.api_key}",
            "Accept": "application/json",
            "Accept-Profile": self._config.schema,
            "Content-Profile": self._config.schema,
        }

    def connect(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers(),
            timeout=httpx.Timeout(self._config.timeout_seconds),
            follow_redirects=False,
            transport=self._transport,
        )

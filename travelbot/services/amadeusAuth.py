import threading
import time
from typing import Optional

import requests
from pydantic import BaseModel

from ..settings.config import settings
from ..settings.logging import app_logger as logger
from .errors import AuthError

# Refresh a cached token this many seconds before Amadeus says it expires
EXPIRY_MARGIN_SECONDS = 30


class Credential(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0
    obtained_at: float

    def is_valid(self, now: Optional[float] = None) -> bool:
        now = time.time() if now is None else now
        return now < self.obtained_at + self.expires_in - EXPIRY_MARGIN_SECONDS


class TokenProvider:
    """
    Client-credentials exchange against the Amadeus OAuth2 endpoint.

    Without caching every call performs a fresh round trip. With caching the
    last credential is reused until it is close to expiry.
    """

    def __init__(self, client_id: str, client_secret: str, base_url: str,
                 timeout: float = 15, cache_tokens: bool = False):
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = f"{base_url.rstrip('/')}/v1/security/oauth2/token"
        self.timeout = timeout
        self.cache_tokens = cache_tokens
        self._cached: Optional[Credential] = None
        self._lock = threading.Lock()

    def acquire(self) -> Credential:
        if not self.cache_tokens:
            return self._request_token()

        with self._lock:
            if self._cached is not None and self._cached.is_valid():
                logger.info("Reusing cached Amadeus token")
                return self._cached
            self._cached = self._request_token()
            return self._cached

    def _request_token(self) -> Credential:
        logger.info("Authenticating with Amadeus")
        try:
            response = requests.post(
                self.token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Amadeus authentication request failed: %s", e)
            raise AuthError("No se pudo autenticar con la API de Amadeus.", payload=str(e)) from e

        if not response.ok:
            payload = _error_payload(response)
            logger.error("Amadeus authentication rejected (%s): %s", response.status_code, payload)
            raise AuthError("No se pudo autenticar con la API de Amadeus.", payload=payload)

        try:
            body = response.json()
            credential = Credential(
                access_token=body["access_token"],
                token_type=body.get("token_type", "Bearer"),
                expires_in=int(body.get("expires_in", 0)),
                obtained_at=time.time(),
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Unexpected Amadeus token payload: %s", e)
            raise AuthError("No se pudo autenticar con la API de Amadeus.", payload=str(e)) from e

        logger.info("Amadeus token obtained, valid for %ss", credential.expires_in)
        return credential


def _error_payload(response: requests.Response):
    try:
        return response.json()
    except ValueError:
        return response.text


token_provider = TokenProvider(
    client_id=settings.AMADEUS_API_KEY,
    client_secret=settings.AMADEUS_API_SECRET,
    base_url=settings.AMADEUS_BASE_URL,
    timeout=settings.HTTP_TIMEOUT,
    cache_tokens=settings.AMADEUS_TOKEN_CACHE,
)

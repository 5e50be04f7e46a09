"""
HTTP client for the dictionary service.

Every endpoint answers through ``send_request``, which checks the status
and hands the body to ``clean_response``: article markup comes back as a
serialized WordRecord, everything else as unwrapped JSON.

Usage:
    client = DleClient()
    body = client.fetch_word("KYtLWBc", include_conjugations=True)
"""

import logging
from typing import Optional
from urllib.parse import quote_plus, urlencode

import requests

from raelex.config import Settings
from raelex.envelope import clean_response
from raelex.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class DleClient:
    """Thin wrapper around a requests session for the dictionary endpoints."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def _url(self, endpoint: str) -> str:
        return self.settings.base_url + endpoint.lstrip("/")

    def _get(self, endpoint: str, headers: dict) -> requests.Response:
        url = self._url(endpoint)
        logger.debug(f"GET {url}")
        try:
            return self.session.get(url, headers=headers, timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise UpstreamError(f"Request to {url} failed: {e}") from e

    def send_request(self, endpoint: str, include_conjugations: bool = False) -> bytes:
        """Query an endpoint and return the cleaned JSON body."""
        response = self._get(endpoint, {
            "User-Agent": self.settings.user_agent,
            "Authorization": self.settings.auth_token,
            "Content-Type": "application/x-www-form-urlencoded",
        })

        if response.status_code != 200:
            logger.warning(f"{endpoint}: upstream returned {response.status_code}")
            raise UpstreamError(f"API returned status: {response.status_code}")

        body = response.content.decode("utf-8", errors="replace")
        return clean_response(body, include_conjugations)

    def fetch_raw(self, endpoint: str) -> bytes:
        """Return the raw body without any cleanup (for debugging)."""
        response = self._get(endpoint, {
            "User-Agent": self.settings.user_agent,
            "Authorization": self.settings.auth_token,
        })
        return response.content

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def word_of_the_day(self) -> bytes:
        return self.send_request("wotd?callback=json")

    def random_word(self) -> bytes:
        return self.send_request("random")

    def search(self, query: str) -> bytes:
        return self.send_request("search?w=" + quote_plus(query))

    def fetch_word(self, word_id: str, include_conjugations: bool = False) -> bytes:
        return self.send_request("fetch?id=" + quote_plus(word_id), include_conjugations)

    def key_query(self, query: str) -> bytes:
        return self.send_request("keys?" + urlencode({"callback": "jsonp123", "q": query}))

    def anagram(self, word: str) -> bytes:
        return self.send_request("anagram?w=" + quote_plus(word))

"""HTTP client that posts generated log documents to the ingestion API."""

import requests


class LogSender:
    def __init__(self, api_url: str, timeout: float = 5.0):
        self.api_url = api_url
        self.timeout = timeout
        self._session = requests.Session()

    def send(self, document: dict) -> dict:
        """POST one document; raises requests.RequestException on failure."""
        resp = self._session.post(self.api_url, json=document, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def close(self):
        self._session.close()

"""
HTTP client for the dashboard API.

Fetches the full record set once; the dashboard filters and aggregates it
locally. Network failures are logged and yield an empty dataset.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from core.config import get_settings

logger = logging.getLogger(__name__)


class DashboardAPIClient:
    """Client for the ``/api/data`` endpoint."""

    def __init__(self, api_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            api_url: Base URL of the API server (default: DASHBOARD_API_URL or localhost:5000)
            timeout: Request timeout in seconds (default: DASHBOARD_API_TIMEOUT)
        """
        settings = get_settings()
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout

    def fetch_records(self) -> List[Dict[str, Any]]:
        """
        Fetch every stored record.

        Returns:
            List of records, or an empty list when the request fails
        """
        url = f"{self.api_url}/api/data"
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError):
            logger.exception("Error fetching data from %s", url)
            return []

        if not isinstance(payload, list):
            logger.error("Unexpected payload from %s: expected a list, got %s", url, type(payload).__name__)
            return []
        return payload

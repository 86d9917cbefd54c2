#!/usr/bin/env python
# Base service for API communication
import logging
import requests
from typing import Dict, Any, Optional, Iterable

from worldsmith_client.utils.config import config
from worldsmith_client.api.query_cache import QueryCache, QueryResult, query_cache
from worldsmith_client.ui.console import show_error, show_success

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong. Please try again."


class APIError(Exception):
    """Exception raised for API errors"""
    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")


class BaseService:
    """
    Base class for API services.

    Reads go through the shared query cache keyed by endpoint path. Writes go
    through mutate(), which invalidates the affected keys only after the
    server accepted the change.
    """

    def __init__(self, session=None, cache: Optional[QueryCache] = None, server_url: Optional[str] = None):
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else query_cache
        self.server_url = config.server_url if server_url is None else server_url

    def _get_headers(self) -> Dict[str, str]:
        """Get common headers for API requests"""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def _handle_response(self, response) -> Any:
        """Process API response and handle errors"""
        if 200 <= response.status_code < 300:
            if response.status_code == 204:  # No content
                return {}

            try:
                return response.json()
            except ValueError:
                return {"message": response.text}

        try:
            error_data = response.json()
            detail = error_data.get("detail", "Unknown error")
        except (ValueError, AttributeError):
            detail = response.text or "Unknown error"

        raise APIError(response.status_code, detail)

    def request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        """Send one request; raises APIError on any failure"""
        url = f"{self.server_url}{endpoint}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                json=data,
                params=params,
                headers=self._get_headers(),
                timeout=config.timeout
            )
        except requests.RequestException as e:
            raise APIError(503, f"Request failed: {str(e)}")

        return self._handle_response(response)

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request to API"""
        return self.request("GET", endpoint, params=params)

    def query(self, key: str) -> QueryResult:
        """Read an endpoint through the cache"""
        return self.cache.query(key, self.get)

    def mutate(self,
               method: str,
               endpoint: str,
               data: Optional[Dict[str, Any]] = None,
               invalidate: Iterable[str] = (),
               success_message: Optional[str] = None,
               failure_message: str = GENERIC_FAILURE) -> Optional[Any]:
        """
        Send a create/update/delete request.

        On success the given cache keys are invalidated so the next read
        refetches them. On failure a generic error is shown, nothing is
        invalidated and None is returned.
        """
        try:
            result = self.request(method, endpoint, data=data)
        except APIError as e:
            logger.warning(f"{method} {endpoint} failed: {e.detail}")
            show_error(failure_message)
            return None

        for key in invalidate:
            self.cache.invalidate(key)

        if success_message:
            show_success(success_message)
        return result

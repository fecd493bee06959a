# ticketbridge/trackers/jira.py
"""Jira Cloud REST v3 client.

Thin async wrapper over the handful of endpoints the bridge uses. Every
failure, transport or HTTP status, surfaces as BackendError with the
response body attached for server-side logging.
"""

import base64
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, SecretStr

from ticketbridge.config import JiraSettings
from ticketbridge.core.exceptions import BackendError


API_PREFIX = "/rest/api/3"

# Product access granted to accounts created for new reporters
USER_PRODUCTS = ["jira-software"]


class JiraCredentials(BaseModel):
    """Fixed authorization for every call to one Jira site.

    Built once at startup; the encoded header is never recomputed per request.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    authorization: SecretStr

    @classmethod
    def from_settings(cls, settings: JiraSettings) -> "JiraCredentials":
        """Encode the account email and API token into a Basic auth header.

        Args:
            settings: Jira settings holding the site URL and credential pair.

        Returns:
            Credentials for the configured site.
        """
        pair = f"{settings.email}:{settings.api_token.get_secret_value()}"
        encoded = base64.b64encode(pair.encode("utf-8")).decode("ascii")
        return cls(
            base_url=settings.base_url.rstrip("/"),
            authorization=SecretStr(f"Basic {encoded}"),
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": self.authorization.get_secret_value(),
            "Accept": "application/json",
            "Content-Type": "application/json",
        }


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class JiraClient:
    """Async client for the Jira endpoints used to file and search tickets.

    Owns a pooled httpx.AsyncClient shared by all in-flight requests; call
    aclose() on shutdown.
    """

    def __init__(
        self,
        credentials: JiraCredentials,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize JiraClient.

        Args:
            credentials: Site URL and authorization header.
            timeout: Per-request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self.credentials = credentials
        self._http = httpx.AsyncClient(
            base_url=credentials.base_url,
            headers=credentials.headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    def browse_url(self, issue_key: str) -> str:
        """Return the web URL of an issue."""
        return f"{self.base_url}/browse/{issue_key}"

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request to the Jira API and decode the JSON reply.

        Args:
            method: HTTP method.
            path: Path below /rest/api/3.
            params: Optional query parameters.
            json: Optional JSON body.

        Returns:
            Decoded JSON response.

        Raises:
            BackendError: On transport failure, non-2xx status, or a non-JSON reply.
        """
        full_path = f"{API_PREFIX}{path}"
        try:
            response = await self._http.request(method, full_path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = _response_body(e.response)
            logger.error(
                "Jira request failed",
                method=method,
                path=full_path,
                status_code=e.response.status_code,
                body=body,
            )
            raise BackendError(
                f"Jira {method} {full_path} returned {e.response.status_code}",
                method=method,
                path=full_path,
                status_code=e.response.status_code,
                body=body,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Jira request failed", method=method, path=full_path, error=str(e))
            raise BackendError(
                f"Jira {method} {full_path} failed: {e}",
                method=method,
                path=full_path,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"Jira {method} {full_path} returned a non-JSON body",
                method=method,
                path=full_path,
                status_code=response.status_code,
                body=response.text,
            ) from e

    async def search_users(self, email: str) -> list[dict[str, Any]]:
        """Find accounts matching an email address."""
        return await self._request("GET", "/user/search", params={"query": email})

    async def create_user(self, email: str) -> dict[str, Any]:
        """Create an account for an email address with Jira Software access."""
        return await self._request(
            "POST",
            "/user",
            json={"emailAddress": email, "products": USER_PRODUCTS},
        )

    async def list_priorities(self) -> list[dict[str, Any]]:
        """Return every priority defined on the site."""
        return await self._request("GET", "/priority")

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Create an issue from a complete ``fields`` payload."""
        return await self._request("POST", "/issue", json={"fields": fields})

    async def search_issues(
        self,
        jql: str,
        *,
        fields: list[str],
        start_at: int = 0,
        max_results: int = 10,
    ) -> dict[str, Any]:
        """Run a JQL search and return one page of results.

        Args:
            jql: Query expression.
            fields: Issue fields to include for each result.
            start_at: Index of the first result.
            max_results: Page size.

        Returns:
            Raw search response with issues, total, startAt and maxResults.
        """
        return await self._request(
            "GET",
            "/search",
            params={
                "jql": jql,
                "fields": ",".join(fields),
                "startAt": start_at,
                "maxResults": max_results,
            },
        )

"""Remote describe connections.

A connection exposes two coroutines: one listing the object names known to
the instance, one fetching the full describe document of a named object.
Retry, batching and rate limiting are left to the connection.

The Salesforce implementation talks to the REST API with an
``httpx.AsyncClient`` authenticated by a bearer access token:

    GET {instance}/services/data/v{version}/sobjects/
    GET {instance}/services/data/v{version}/sobjects/{name}/describe/
"""

from typing import Any, Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError as PydanticValidationError

from describe_tools.core import get_logger
from describe_tools.core.exceptions import RemoteDescribeError
from describe_tools.describe import DescribeDocument
from describe_tools.schemas import DescribeGlobalResult, SalesforceConnectionConfig

logger = get_logger(__name__)


@runtime_checkable
class DescribeConnection(Protocol):
    """Protocol for connections that can describe remote objects."""

    async def list_object_names(self) -> list[str]:
        """Return the names of all objects known to the instance."""
        ...

    async def describe(self, name: str) -> DescribeDocument:
        """Return the full describe document for a named object."""
        ...


class SalesforceConnection:
    """Describe connection over the Salesforce REST API."""

    def __init__(
        self,
        config: SalesforceConnectionConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the connection.

        Args:
            config: Connection configuration
            client: HTTP client to use; one is created (and owned) if omitted
        """
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout)
        )
        logger.info(
            "Salesforce connection initialized",
            instance_url=config.instance_url,
            api_version=config.api_version,
        )

    async def __aenter__(self) -> "SalesforceConnection":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this connection created it."""
        if self._owns_client:
            await self._client.aclose()

    @property
    def base_url(self) -> str:
        return f"{self.config.instance_url}/services/data/v{self.config.api_version}"

    async def _get_json(self, path: str, object_name: Optional[str] = None) -> Any:
        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.config.access_token}",
            "Accept": "application/json",
        }

        try:
            response = await self._client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            error_msg = (
                f"Request to '{url}' failed with status {e.response.status_code}"
            )
            logger.error(error_msg, url=url, status_code=e.response.status_code)
            raise RemoteDescribeError(error_msg, object_name) from e
        except httpx.HTTPError as e:
            error_msg = f"Request to '{url}' failed: {e}"
            logger.error(error_msg, url=url, error=str(e))
            raise RemoteDescribeError(error_msg, object_name) from e
        except ValueError as e:
            error_msg = f"Response from '{url}' is not valid JSON: {e}"
            logger.error(error_msg, url=url, error=str(e))
            raise RemoteDescribeError(error_msg, object_name) from e

    async def list_object_names(self) -> list[str]:
        """List the names of all objects of the instance.

        Raises:
            RemoteDescribeError: If the listing request fails
        """
        payload = await self._get_json("/sobjects/")

        try:
            result = DescribeGlobalResult.model_validate(payload)
        except PydanticValidationError as e:
            error_msg = f"Unexpected global describe response: {e}"
            logger.error(error_msg)
            raise RemoteDescribeError(error_msg) from e

        names = [o.name for o in result.sobjects]
        logger.info("Remote objects listed", object_count=len(names))
        return names

    async def describe(self, name: str) -> DescribeDocument:
        """Fetch the describe document of one object.

        Raises:
            RemoteDescribeError: If the describe request fails
        """
        logger.debug("Describing remote object", object_name=name)
        return await self._get_json(f"/sobjects/{name}/describe/", object_name=name)

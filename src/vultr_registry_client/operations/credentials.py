"""Docker credential issuance."""

import logging
from typing import Optional

from ..core.client import Client
from ..core.query import encode_query
from ..core.session import parse_json_response
from ..exceptions import DecodeError
from ..models import DockerCredentials, DockerCredentialsOptions
from .base import REGISTRY_PATH, path_segment

logger = logging.getLogger(__name__)


class CredentialsHandler:
    """Issue Docker credentials for a registry."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def create_docker_credentials(
        self,
        registry_id: str,
        options: Optional[DockerCredentialsOptions] = None,
    ) -> DockerCredentials:
        """Issue a new set of Docker credentials.

        Every call creates a new credential on the server. The API issues
        them in answer to an OPTIONS request, and that verb must be kept.
        The request is not retried on 5xx or connection errors.

        Args:
            registry_id: Registry ID
            options: Expiry and write access; unset fields are not sent

        Returns:
            Credentials as the raw Docker config.json bytes

        Raises:
            RequestConstructionError: If registry_id is empty
            APIError: If the API refuses to issue credentials
            DecodeError: If the response body is not a JSON document
        """
        path = (
            f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}"
            "/docker-credentials"
        )
        query = encode_query(options or DockerCredentialsOptions())
        req = self.client.new_request("OPTIONS", path, query=query)
        resp = await self.client.do(req, raw=True)
        if parse_json_response(resp.body) is None:
            raise DecodeError("Empty docker credentials response")
        logger.debug("Issued docker credentials for registry %s", registry_id)
        return DockerCredentials(resp.body)

"""LeverClient: one entry point for every Lever resource."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from lever_data.config import ClientConfig
from lever_data.endpoints.applications import ApplicationsEndpoint
from lever_data.endpoints.archive_reasons import ArchiveReasonsEndpoint
from lever_data.endpoints.contacts import ContactsEndpoint
from lever_data.endpoints.feedback import FeedbackEndpoint
from lever_data.endpoints.interviews import InterviewsEndpoint
from lever_data.endpoints.opportunities import OpportunitiesEndpoint
from lever_data.endpoints.resumes import ResumesEndpoint
from lever_data.endpoints.stages import StagesEndpoint
from lever_data.endpoints.tags import SourcesEndpoint, TagsEndpoint
from lever_data.endpoints.users import UsersEndpoint
from lever_data.errors import ConfigurationError
from lever_data.transport import Transport

logger = logging.getLogger(__name__)


class LeverClient:
    """
    Client for the Lever Data API.

        with LeverClient(api_key="...") as lever:
            page = lever.opportunities.list(ListOpportunitiesRequest(expansion=Expansion(expand=["stage"])))

    config defaults to ClientConfig.from_env(); keyword overrides (api_key,
    base_url, user_agent, timeout, headers) replace individual fields. Pass
    client to reuse an existing httpx.Client; it is not closed by close().
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        client: Optional[httpx.Client] = None,
        **overrides: Any,
    ):
        config = config or ClientConfig.from_env()
        unknown = set(overrides) - set(ClientConfig.model_fields)
        if unknown:
            raise ConfigurationError(f"Unknown client options: {sorted(unknown)}")
        if overrides:
            try:
                config = ClientConfig.model_validate({**config.model_dump(), **overrides})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid client options: {e}") from e
        if not config.api_key:
            logger.warning("No Lever API key configured; requests will be unauthenticated")

        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout)
        self._transport = Transport(self._client, config)

        self.opportunities = OpportunitiesEndpoint(self._transport)
        self.applications = ApplicationsEndpoint(self._transport)
        self.interviews = InterviewsEndpoint(self._transport)
        self.feedback = FeedbackEndpoint(self._transport)
        self.users = UsersEndpoint(self._transport)
        self.stages = StagesEndpoint(self._transport)
        self.tags = TagsEndpoint(self._transport)
        self.sources = SourcesEndpoint(self._transport)
        self.resumes = ResumesEndpoint(self._transport)
        self.contacts = ContactsEndpoint(self._transport)
        self.archive_reasons = ArchiveReasonsEndpoint(self._transport)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    def close(self) -> None:
        """Close the underlying httpx client if this LeverClient created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "LeverClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

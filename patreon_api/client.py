"""
HTTP client for the Patreon API v2.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional
from urllib.parse import urlencode

import requests
from authlib.common.errors import AuthlibBaseError

from .config import BASE_URL, Config
from .entities import Campaign, Member, User
from .errors import APIError, DecodeError, TransportError
from .options import RequestOptions
from .processors.resources import CampaignProcessor, IdentityProcessor, MemberProcessor
from .utils.document import parse_error_document

logger = logging.getLogger(__name__)


class PatreonClient:
    """
    Client for Patreon API v2 resources.

    Every fetch performs one GET request and assembles the returned compound
    document into typed entities. Authentication is left to the session:
    pass an authenticated ``requests.Session`` such as the authlib
    ``OAuth2Session`` built by ``auth.create_oauth_session``.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = BASE_URL,
        config: Optional[Config] = None,
        timeout: float = 30.0
    ):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.config = config or Config()
        self.timeout = timeout

        self._identity = IdentityProcessor()
        self._campaigns = CampaignProcessor()
        self._members = MemberProcessor()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.session.close()

    def build_url(self, path: str, options: Optional[RequestOptions] = None) -> str:
        """
        Build request URL with include, fieldset and pagination parameters.

        Args:
            path: Endpoint path (e.g., '/api/oauth2/v2/identity')
            options: Query options

        Returns:
            Absolute URL
        """
        url = f"{self.base_url}{path}"
        params = options.to_params() if options else {}
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _get(self, endpoint_name: str, options: Optional[RequestOptions] = None, **path_params) -> bytes:
        """
        Make GET request to a configured endpoint.

        Returns:
            Raw response body of a successful response
        """
        endpoint = self.config.get_endpoint(endpoint_name)
        url = self.build_url(endpoint.format_path(**path_params), options)

        logger.debug(f"Making request to {endpoint_name}: {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except (requests.RequestException, AuthlibBaseError) as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise self._api_error(response)

        return response.content

    @staticmethod
    def _api_error(response: requests.Response) -> APIError:
        try:
            error_document = parse_error_document(response.content)
        except DecodeError as e:
            logger.warning(f"Could not decode error body of {response.status_code} response: {e}")
            return APIError(response.status_code)
        return APIError(response.status_code, error_document.errors)

    def fetch_identity(self, options: Optional[RequestOptions] = None) -> User:
        """
        Fetch the user the OAuth token belongs to.

        Top-level includes: memberships, campaign. The email address is only
        returned with the identity[email] scope.
        """
        return self._identity.assemble(self._get("identity", options))

    def fetch_campaigns(self, options: Optional[RequestOptions] = None) -> List[Campaign]:
        """
        Fetch campaigns owned by the authorized user.

        Requires the campaigns scope. Top-level includes: tiers, creator,
        benefits, goals.
        """
        return self._campaigns.assemble_list(self._get("campaigns", options))

    def fetch_campaign_by_id(self, campaign_id: str, options: Optional[RequestOptions] = None) -> Campaign:
        """Fetch a single campaign. Requires the campaigns scope."""
        return self._campaigns.assemble(self._get("campaign", options, id=campaign_id))

    def fetch_member_by_id(self, member_id: str, options: Optional[RequestOptions] = None) -> Member:
        """
        Fetch a single member.

        Requires the campaigns.members scope. Top-level includes: address
        (requires campaigns.members.address), campaign,
        currently_entitled_tiers, user.
        """
        return self._members.assemble(self._get("member", options, id=member_id))

    def fetch_members_by_campaign_id(
        self,
        campaign_id: str,
        options: Optional[RequestOptions] = None
    ) -> List[Member]:
        """Fetch one page of a campaign's members. Requires the campaigns.members scope."""
        return self._members.assemble_list(self._get("campaign_members", options, id=campaign_id))

    def fetch_campaigns_by_ids(
        self,
        campaign_ids: Iterable[str],
        options: Optional[RequestOptions] = None,
        max_workers: int = 10
    ) -> List[Campaign]:
        """
        Parallel fetch of several campaigns.

        Args:
            campaign_ids: Campaign ids
            options: Query options applied to every request
            max_workers: Number of threads

        Returns:
            Campaigns in the order of campaign_ids
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(self.fetch_campaign_by_id, campaign_id, options)
                for campaign_id in campaign_ids
            ]
            results = [f.result() for f in futures]
        return results

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs) -> "PatreonClient":
        """Create client authenticated from environment variables."""
        from .auth import get_oauth_session

        return cls(session=get_oauth_session(env_file), **kwargs)

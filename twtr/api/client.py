"""
Twitter API Client - Main facade for all API operations.

Groups endpoints into domain-specific modules and also offers flat
methods named after the API operations.
"""

from typing import Optional, Dict

from ..auth import OAuth2Client
from ..config import ClientConfig, Credentials
from ..models import (
    ListLookupResponse,
    ListMembersResponse,
    ListsSpecifiedUserResponse,
    OwnedListsResponse,
    PostListMembersResponse,
    UndoListMembersResponse,
)
from ..options import (
    ListLookupOptions,
    ListMembersOptions,
    ListsSpecifiedUserOptions,
    OwnedListsOptions,
)
from ._http import HTTPClient
from .list_members import ListMembersAPI
from .lists import ListsAPI


class TwitterClient:
    """
    Client for the Twitter API v2.

    Usage (domain style):
        client = TwitterClient(ClientConfig(api_key="..."))
        page = client.list_members_api.list_members("84839422")
        lists = client.lists.owned_lists("2244994945")

    Usage (flat):
        client = get_client("...")
        page = client.list_members("84839422")

    Every method raises a TwitterError subclass on failure; APIError
    carries the partially decoded response.
    """

    def __init__(self, config: ClientConfig):
        """
        Initialize the API client.

        Args:
            config: Client configuration
        """
        self._credentials = Credentials(config)
        self._http = HTTPClient(config, self._credentials)

        # Domain-specific API modules
        self.lists = ListsAPI(self._http)
        self.list_members_api = ListMembersAPI(self._http)
        self.oauth2 = OAuth2Client(self._http)

    @property
    def config(self) -> ClientConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def credentials(self) -> Credentials:
        """Get the credential holder."""
        return self._credentials

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    def export_credentials(self) -> Dict[str, str]:
        """Snapshot of the current credentials."""
        return self._credentials.export()

    # ========== Authentication ==========

    def generate_app_only_bearer_token(self, timeout: Optional[float] = None) -> bool:
        """Obtain an app-only bearer token and use it for later calls."""
        return self.oauth2.generate_app_only_bearer_token(timeout=timeout)

    def invalidate_bearer_token(self, timeout: Optional[float] = None) -> str:
        """Invalidate the stored bearer token."""
        return self.oauth2.invalidate_bearer_token(timeout=timeout)

    # ========== List Members ==========

    def list_members(
        self,
        list_id: str,
        options: Optional[ListMembersOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListMembersResponse:
        """Get the members of a list."""
        return self.list_members_api.list_members(list_id, options, timeout)

    def lists_specified_user(
        self,
        user_id: str,
        options: Optional[ListsSpecifiedUserOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListsSpecifiedUserResponse:
        """Get the lists a user is a member of."""
        return self.list_members_api.lists_specified_user(user_id, options, timeout)

    def post_list_members(
        self,
        list_id: str,
        user_id: str,
        timeout: Optional[float] = None,
    ) -> PostListMembersResponse:
        """Add a user to a list."""
        return self.list_members_api.add_member(list_id, user_id, timeout)

    def undo_list_members(
        self,
        list_id: str,
        user_id: str,
        timeout: Optional[float] = None,
    ) -> UndoListMembersResponse:
        """Remove a user from a list."""
        return self.list_members_api.remove_member(list_id, user_id, timeout)

    # ========== Lists ==========

    def list_lookup(
        self,
        list_id: str,
        options: Optional[ListLookupOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListLookupResponse:
        """Get a list by ID."""
        return self.lists.lookup(list_id, options, timeout)

    def owned_lists(
        self,
        user_id: str,
        options: Optional[OwnedListsOptions] = None,
        timeout: Optional[float] = None,
    ) -> OwnedListsResponse:
        """Get the lists owned by a user."""
        return self.lists.owned_lists(user_id, options, timeout)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "TwitterClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(api_key: str, **kwargs) -> TwitterClient:
    """
    Get an API client instance.

    Args:
        api_key: Bearer token / API key
        **kwargs: Any other ClientConfig field (consumer_key,
            consumer_secret, session, timeout, ...)

    Returns:
        TwitterClient instance
    """
    return TwitterClient(ClientConfig(api_key=api_key, **kwargs))

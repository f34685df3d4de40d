"""
Lists API - List lookup.
"""

from typing import Optional

from ._http import HTTPClient, require_id
from ..models import ListLookupResponse, OwnedListsResponse
from ..options import ListLookupOptions, OwnedListsOptions


class ListsAPI:
    """
    API for list lookup operations.

    Handles:
    - Single list by ID
    - Lists owned by a user
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Lists API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def lookup(
        self,
        list_id: str,
        options: Optional[ListLookupOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListLookupResponse:
        """Get a list by ID."""
        list_id = require_id("list_id", list_id)
        return self._http.request(
            "GET",
            "lists/{id}",
            ListLookupResponse,
            path_params={"id": list_id},
            options=options,
            timeout=timeout,
        )

    def owned_lists(
        self,
        user_id: str,
        options: Optional[OwnedListsOptions] = None,
        timeout: Optional[float] = None,
    ) -> OwnedListsResponse:
        """
        Get the lists owned by a user.

        Args:
            user_id: Owner's user ID
            options: Expansions, fields and pagination
            timeout: Per-call timeout in seconds
        """
        user_id = require_id("user_id", user_id)
        return self._http.request(
            "GET",
            "users/{id}/owned_lists",
            OwnedListsResponse,
            path_params={"id": user_id},
            options=options,
            timeout=timeout,
        )

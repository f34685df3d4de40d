"""
List Members API - Membership lookup and management.
"""

import logging
from typing import Optional

from ._http import HTTPClient, require_id
from ..models import (
    ListMembersResponse,
    ListsSpecifiedUserResponse,
    PostListMembersResponse,
    UndoListMembersResponse,
)
from ..options import ListMembersOptions, ListsSpecifiedUserOptions

logger = logging.getLogger(__name__)


class ListMembersAPI:
    """
    API for list membership operations.

    Handles:
    - Members of a list
    - Lists a user is a member of
    - Adding and removing members
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize List Members API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list_members(
        self,
        list_id: str,
        options: Optional[ListMembersOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListMembersResponse:
        """
        Get the members of a list.

        Args:
            list_id: List ID
            options: Expansions, fields and pagination
            timeout: Per-call timeout in seconds

        Returns:
            Members in API order, with ``meta`` carrying pagination tokens
        """
        list_id = require_id("list_id", list_id)
        return self._http.request(
            "GET",
            "lists/{id}/members",
            ListMembersResponse,
            path_params={"id": list_id},
            options=options,
            timeout=timeout,
        )

    def lists_specified_user(
        self,
        user_id: str,
        options: Optional[ListsSpecifiedUserOptions] = None,
        timeout: Optional[float] = None,
    ) -> ListsSpecifiedUserResponse:
        """
        Get the lists a user is a member of.

        Args:
            user_id: User ID
            options: Expansions, fields and pagination
            timeout: Per-call timeout in seconds
        """
        user_id = require_id("user_id", user_id)
        return self._http.request(
            "GET",
            "users/{id}/list_memberships",
            ListsSpecifiedUserResponse,
            path_params={"id": user_id},
            options=options,
            timeout=timeout,
        )

    def add_member(
        self,
        list_id: str,
        user_id: str,
        timeout: Optional[float] = None,
    ) -> PostListMembersResponse:
        """
        Add a user to a list.

        Args:
            list_id: List ID
            user_id: ID of the user to add
            timeout: Per-call timeout in seconds

        Returns:
            Membership state after the call
        """
        list_id = require_id("list_id", list_id)
        user_id = require_id("user_id", user_id)
        logger.debug(f"Adding user {user_id} to list {list_id}")
        return self._http.request(
            "POST",
            "lists/{id}/members",
            PostListMembersResponse,
            path_params={"id": list_id},
            json_data={"user_id": user_id},
            timeout=timeout,
        )

    def remove_member(
        self,
        list_id: str,
        user_id: str,
        timeout: Optional[float] = None,
    ) -> UndoListMembersResponse:
        """Remove a user from a list."""
        list_id = require_id("list_id", list_id)
        user_id = require_id("user_id", user_id)
        logger.debug(f"Removing user {user_id} from list {list_id}")
        return self._http.request(
            "DELETE",
            "lists/{id}/members/{user_id}",
            UndoListMembersResponse,
            path_params={"id": list_id, "user_id": user_id},
            timeout=timeout,
        )

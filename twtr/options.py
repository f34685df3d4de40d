"""
Query options for list endpoints.

Each endpoint takes one option record. Fields left as None (or empty)
are omitted from the query string; the others are emitted once each, in
declaration order.
"""

from dataclasses import dataclass, fields
from typing import Optional, Dict, Any, List

# Field name -> query parameter name where they differ
_QUERY_KEYS = {
    "list_fields": "list.fields",
    "user_fields": "user.fields",
    "tweet_fields": "tweet.fields",
}

# Expansions
EXPANSION_OWNER_ID = "owner_id"
EXPANSION_PINNED_TWEET_ID = "pinned_tweet_id"

# list.fields
LIST_FIELD_CREATED_AT = "created_at"
LIST_FIELD_FOLLOWER_COUNT = "follower_count"
LIST_FIELD_MEMBER_COUNT = "member_count"
LIST_FIELD_PRIVATE = "private"
LIST_FIELD_DESCRIPTION = "description"
LIST_FIELD_OWNER_ID = "owner_id"


class _Options:
    """Shared serialization for option dataclasses."""

    def to_params(self) -> Dict[str, str]:
        """
        Build query parameters.

        Returns:
            Ordered mapping of query key to value with unset options dropped
        """
        params: Dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                if not value:
                    continue
                value = ",".join(str(v) for v in value)
            else:
                value = str(value)
                if not value:
                    continue
            params[_QUERY_KEYS.get(f.name, f.name)] = value
        return params


@dataclass
class ListMembersOptions(_Options):
    """Options for GET /2/lists/:id/members."""
    expansions: Optional[List[str]] = None
    max_results: Optional[int] = None
    pagination_token: Optional[str] = None
    tweet_fields: Optional[List[str]] = None
    user_fields: Optional[List[str]] = None


@dataclass
class ListsSpecifiedUserOptions(_Options):
    """Options for GET /2/users/:id/list_memberships."""
    expansions: Optional[List[str]] = None
    list_fields: Optional[List[str]] = None
    max_results: Optional[int] = None
    pagination_token: Optional[str] = None
    user_fields: Optional[List[str]] = None


@dataclass
class OwnedListsOptions(_Options):
    """Options for GET /2/users/:id/owned_lists."""
    expansions: Optional[List[str]] = None
    list_fields: Optional[List[str]] = None
    max_results: Optional[int] = None
    pagination_token: Optional[str] = None
    user_fields: Optional[List[str]] = None


@dataclass
class ListLookupOptions(_Options):
    """Options for GET /2/lists/:id."""
    expansions: Optional[List[str]] = None
    list_fields: Optional[List[str]] = None
    user_fields: Optional[List[str]] = None


def to_params(options: Any) -> Dict[str, str]:
    """Query parameters for an option record, or none for None."""
    if options is None:
        return {}
    return options.to_params()

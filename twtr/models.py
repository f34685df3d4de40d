"""
Typed models for Twitter API v2 payloads.

Every response shares one envelope::

    {"data": ..., "meta": {...}, "includes": {...}, "errors": [...],
     "title": "...", "detail": "...", "type": "..."}

Each endpoint gets an APIResponse subclass that names its ``data`` member
after what it holds (``users``, ``lists``, ``is_member``). Models are frozen
once decoded and ignore fields they do not know about.
"""

from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to wire form, keeping only fields present on decode."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# ========== Entities ==========

class UserPublicMetrics(_Model):
    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0
    listed_count: int = 0


class User(_Model):
    """A Twitter user."""
    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    pinned_tweet_id: Optional[str] = None
    profile_image_url: Optional[str] = None
    protected: Optional[bool] = None
    url: Optional[str] = None
    verified: Optional[bool] = None
    public_metrics: Optional[UserPublicMetrics] = None
    entities: Optional[Dict[str, Any]] = None


class Tweet(_Model):
    """A tweet, as side-loaded through ``includes``."""
    id: Optional[str] = None
    text: Optional[str] = None
    author_id: Optional[str] = None
    created_at: Optional[str] = None
    conversation_id: Optional[str] = None
    lang: Optional[str] = None


class TwitterList(_Model):
    """A Twitter list."""
    id: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    follower_count: int = 0
    member_count: int = 0
    owner_id: Optional[str] = None
    private: Optional[bool] = None


class IsMember(_Model):
    """Membership state returned by add/remove member calls."""
    is_member: bool = False


# ========== Envelope ==========

class APIResponseError(_Model):
    """
    One entry of the ``errors`` array.

    Covers the resource shape (value, resource_type, resource_id, ...), the
    validation shape (parameters, message) and the OAuth2 shape (code,
    label, message). Fields from shapes not present stay None.
    """
    value: Optional[Any] = None
    detail: Optional[str] = None
    title: Optional[str] = None
    resource_type: Optional[str] = None
    parameter: Optional[str] = None
    resource_id: Optional[str] = None
    type: Optional[str] = None
    parameters: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None
    code: Optional[int] = None
    label: Optional[str] = None

    def describe(self) -> str:
        """Single-line human description."""
        text = self.detail or self.message or self.title or ""
        if self.code is not None:
            return f"[{self.code}] {text}"
        return text


class Meta(_Model):
    """Pagination metadata. No tokens means no further pages."""
    result_count: int = 0
    next_token: Optional[str] = None
    previous_token: Optional[str] = None


class Includes(_Model):
    """Side-loaded entities referenced from the primary data."""
    users: Optional[List[User]] = None
    tweets: Optional[List[Tweet]] = None


class APIResponse(_Model):
    """Fields shared by every response envelope."""
    errors: Optional[List[APIResponseError]] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    type: Optional[str] = None

    def has_payload(self) -> bool:
        """True when the envelope carries something usable on success."""
        return False

    def error_summary(self) -> str:
        """Join top-level and itemized error text into one message."""
        parts = []
        if self.title:
            parts.append(self.title)
        if self.detail:
            parts.append(self.detail)
        if self.errors:
            parts.append("; ".join(e.describe() for e in self.errors if e.describe()))
        return ": ".join(p for p in parts if p)


class PagedResponse(APIResponse):
    """Envelope of paginated collection endpoints."""
    includes: Optional[Includes] = None
    meta: Optional[Meta] = None

    def has_payload(self) -> bool:
        # an empty page carries meta only
        return self.meta is not None


class ListMembersResponse(PagedResponse):
    """Members of a list."""
    users: Optional[List[User]] = Field(default=None, alias="data")

    def has_payload(self) -> bool:
        return self.users is not None or super().has_payload()


class ListsSpecifiedUserResponse(PagedResponse):
    """Lists a user is a member of."""
    lists: Optional[List[TwitterList]] = Field(default=None, alias="data")

    def has_payload(self) -> bool:
        return self.lists is not None or super().has_payload()


class OwnedListsResponse(PagedResponse):
    """Lists owned by a user."""
    lists: Optional[List[TwitterList]] = Field(default=None, alias="data")

    def has_payload(self) -> bool:
        return self.lists is not None or super().has_payload()


class ListLookupResponse(APIResponse):
    """A single list looked up by ID."""
    list: Optional[TwitterList] = Field(default=None, alias="data")
    includes: Optional[Includes] = None

    def has_payload(self) -> bool:
        return self.list is not None


class PostListMembersResponse(APIResponse):
    """Result of adding a member to a list."""
    is_member: Optional[IsMember] = Field(default=None, alias="data")

    def has_payload(self) -> bool:
        return self.is_member is not None


class UndoListMembersResponse(APIResponse):
    """Result of removing a member from a list."""
    is_member: Optional[IsMember] = Field(default=None, alias="data")

    def has_payload(self) -> bool:
        return self.is_member is not None


class BearerTokenResponse(APIResponse):
    """OAuth2 ``/oauth2/token`` response."""
    token_type: Optional[str] = None
    access_token: Optional[str] = None

    def has_payload(self) -> bool:
        return bool(self.access_token)


class InvalidateTokenResponse(APIResponse):
    """OAuth2 ``/oauth2/invalidate_token`` response."""
    access_token: Optional[str] = None

    def has_payload(self) -> bool:
        return bool(self.access_token)

"""Profile data model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


GITHUB_WEB_URL = "https://github.com"


class Profile(BaseModel):
    """Represents a looked-up GitHub account."""

    handle: str = Field(..., min_length=1)
    display_name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    joined_at: datetime | None = None
    repo_count: int = Field(default=0, ge=0)
    follower_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
    location: str | None = None
    blog_url: str | None = None
    social_handle: str | None = None
    company: str | None = None

    @field_validator(
        "display_name",
        "avatar_url",
        "bio",
        "location",
        "blog_url",
        "social_handle",
        "company",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        # GitHub sends "" for unset fields such as blog
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def html_url(self) -> str:
        """Public profile page for this account."""
        return f"{GITHUB_WEB_URL}/{self.handle}"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Profile":
        """Create from a GitHub REST API user payload."""
        return cls(
            handle=data.get("login", ""),
            display_name=data.get("name"),
            avatar_url=data.get("avatar_url"),
            bio=data.get("bio"),
            joined_at=data.get("created_at"),
            repo_count=data.get("public_repos") or 0,
            follower_count=data.get("followers") or 0,
            following_count=data.get("following") or 0,
            location=data.get("location"),
            blog_url=data.get("blog"),
            social_handle=data.get("twitter_username"),
            company=data.get("company"),
        )


DEFAULT_PROFILE = Profile.from_api({
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
    "bio": (
        "Lorem ipsum dolor sit amet, consectetuer adipiscing elit. "
        "Donec odio. Quisque volutpat mattis eros."
    ),
    "created_at": "2011-01-25T18:44:36Z",
    "public_repos": 8,
    "followers": 3938,
    "following": 9,
    "location": "San Francisco",
    "blog": "https://github.blog",
    "twitter_username": "github",
    "company": None,
})

"""Data transformation from API payloads to profiles and display views."""

from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from devfinder.exceptions import ParseError
from devfinder.models.profile import Profile
from devfinder.models.view import ContactEntry, ProfileView


NOT_AVAILABLE = "Not available"
NO_BIO = "This profile has no bio"

# Fixed English abbreviations, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """
    Parse an ISO 8601 timestamp as sent by the GitHub API.

    Examples:
        "2011-01-25T18:44:36Z" -> datetime(2011, 1, 25, 18, 44, 36, tzinfo=UTC)
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value

    clean = value.strip()
    if not clean:
        return None
    if clean.endswith("Z"):
        clean = clean[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(clean)
    except ValueError:
        return None


def format_joined_date(value: str | datetime | None) -> str:
    """
    Format a timestamp as "{day} {abbreviated month} {year}".

    Aware timestamps are converted to UTC first, naive ones are taken as UTC.

    Examples:
        "2011-01-25T18:44:36Z" -> "25 Jan 2011"
        "2020-12-05T00:00:00Z" -> "5 Dec 2020"
    """
    moment = parse_timestamp(value)
    if moment is None:
        return ""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{moment.day} {MONTH_ABBREVIATIONS[moment.month - 1]} {moment.year}"


def transform_profile(raw: Any) -> Profile:
    """
    Transform a raw GitHub user payload into a validated Profile.

    Args:
        raw: Decoded JSON body of GET /users/{handle}

    Returns:
        Validated Profile model

    Raises:
        ParseError: If the payload is not a user object
    """
    if not isinstance(raw, dict):
        raise ParseError(f"Expected a JSON object, got {type(raw).__name__}")

    try:
        return Profile.from_api(raw)
    except ValidationError as e:
        raise ParseError(f"Invalid user payload: {e.error_count()} error(s)") from e


def normalize_blog_link(blog: str) -> str:
    """Blogs are often stored without a scheme; links need one."""
    if blog.startswith("http"):
        return blog
    return f"https://{blog}"


def _contact(label: str, text: str | None, link: str | None = None) -> ContactEntry:
    if text:
        return ContactEntry(label=label, text=text, available=True, link=link)
    return ContactEntry(label=label, text=NOT_AVAILABLE, available=False)


def build_view(profile: Profile) -> ProfileView:
    """
    Derive every display string for a profile card.

    Pure function: applies the display name, bio and contact fallbacks in one
    place so renderers only ever print what they are given.
    """
    blog_link = normalize_blog_link(profile.blog_url) if profile.blog_url else None
    twitter_text = f"@{profile.social_handle}" if profile.social_handle else None
    twitter_link = (
        f"https://twitter.com/{profile.social_handle}" if profile.social_handle else None
    )
    joined = format_joined_date(profile.joined_at)

    return ProfileView(
        name=profile.display_name or profile.handle,
        handle=f"@{profile.handle}",
        profile_url=profile.html_url,
        avatar_url=profile.avatar_url,
        avatar_alt=f"{profile.handle}'s avatar",
        bio=profile.bio or NO_BIO,
        has_bio=bool(profile.bio),
        joined=f"Joined {joined}" if joined else "",
        repos=profile.repo_count,
        followers=profile.follower_count,
        following=profile.following_count,
        location=_contact("Location", profile.location),
        blog=_contact("Website", profile.blog_url, blog_link),
        twitter=_contact("Twitter", twitter_text, twitter_link),
        company=_contact("Company", profile.company),
    )

"""Presentation view model."""

from pydantic import BaseModel


class ContactEntry(BaseModel):
    """One contact line on the profile card."""

    label: str
    text: str
    available: bool
    link: str | None = None


class ProfileView(BaseModel):
    """Display strings for a profile card, with every fallback applied."""

    name: str
    handle: str
    profile_url: str
    avatar_url: str | None = None
    avatar_alt: str
    bio: str
    has_bio: bool
    joined: str
    repos: int
    followers: int
    following: int
    location: ContactEntry
    blog: ContactEntry
    twitter: ContactEntry
    company: ContactEntry

    @property
    def contacts(self) -> list[ContactEntry]:
        return [self.location, self.blog, self.twitter, self.company]

# models.py
"""Pydantic models for the portfolio content."""

from enum import Enum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from utils import is_absolute_url, is_email, slugify


def _absolute_url(value):
    if not is_absolute_url(value):
        raise ValueError(f"must be an absolute URL: {value!r}")
    return value


def _email_address(value):
    if not is_email(value):
        raise ValueError(f"not an email address: {value!r}")
    return value


# Checked with HttpUrl / EmailStr, but the source string is kept as written
AbsoluteUrl = Annotated[str, AfterValidator(_absolute_url)]
EmailAddress = Annotated[str, AfterValidator(_email_address)]


class Status(str, Enum):
    """Lifecycle of a project as shown on the page."""

    ACTIVE = "Active"
    COMPLETE = "Complete"
    ARCHIVED = "Archived"


class ContentModel(BaseModel):
    """Base for all content records: immutable, camelCase on the outside."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_dict(self):
        """Export shape: camelCase keys, absent optional fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContactInfo(ContentModel):
    """Contact information model."""

    email: EmailAddress
    github: AbsoluteUrl
    linkedin: AbsoluteUrl


class Hero(ContentModel):
    """Hero section model."""

    title: str = Field(min_length=1)
    visible_title: str = Field(min_length=1, alias="visibleTitle")
    subtitle: str = Field(min_length=1)
    aside: str = Field(min_length=1)


class ProjectDetails(ContentModel):
    """One project entry; title is the display key."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    github_url: Optional[AbsoluteUrl] = Field(default=None, alias="githubUrl")
    web_url: Optional[str] = Field(default=None, alias="webUrl", min_length=1)
    tags: Optional[str] = Field(default=None, min_length=1)
    status: Optional[Status] = None

    @property
    def slug(self):
        """Page anchor derived from the title."""
        return slugify(self.title)

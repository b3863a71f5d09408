# utils.py
"""
Utility functions for consuming portfolio content.
Handles slugs, tag lists and link normalisation for the rendering layer.
"""

import re

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

_HTTP_URL = TypeAdapter(HttpUrl)
_EMAIL = TypeAdapter(EmailStr)


def slugify(text):
    """
    Convert a project title into a lowercase, hyphen-separated page anchor.

    Args:
        text: Input string to convert, usually a project title

    Returns:
        str: Anchor slug, e.g. "Address API" -> "address-api"
    """
    if not text:
        return ""

    text = str(text).strip().lower()
    text = re.sub(r'[^\w\s-]', '', text)
    return re.sub(r'[\s_-]+', '-', text).strip('-')


def split_tags(tags):
    """
    Split a space-separated tag string into individual labels.

    Args:
        tags: Free text such as "Go CLI-APP Tooling", or None

    Returns:
        list: Tag labels in their original order
    """
    if not tags:
        return []
    return tags.split()


def is_absolute_url(value):
    """Return True for an http(s) URL that pydantic's HttpUrl accepts."""
    if not isinstance(value, str):
        return False
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        return False
    return True


def is_email(value):
    if not isinstance(value, str):
        return False
    try:
        _EMAIL.validate_python(value)
    except ValidationError:
        return False
    return True


def web_href(web_url):
    """
    Turn a project's web URL into something usable as a link target.

    Bare domains ("sh.xaaha.dev") get an https scheme; absolute URLs pass through.
    """
    if web_url is None:
        return None
    if re.match(r'^[a-zA-Z][a-zA-Z0-9+.-]*://', web_url):
        return web_url
    return f"https://{web_url.lstrip('/')}"


def has_link(project):
    """Whether a project has at least one of a source or a live link."""
    return bool(project.github_url or project.web_url)

# content.py
"""
Content provider for the portfolio site.
Validates the data in config.py once at import and hands out read-only models.
"""

import logging
from collections import Counter

from config import EMAIL, GITHUB, LINKEDIN, HERO, PROJECT_INFO
from models import ContactInfo, Hero, ProjectDetails

logger = logging.getLogger(__name__)


def _load_projects(raw_projects):
    """
    Build the ordered project tuple from raw dict entries.

    Args:
        raw_projects: List of project dicts in display order

    Returns:
        tuple: ProjectDetails in the same order

    Raises:
        ValueError: If an entry is malformed or two entries share a title or anchor
    """
    projects = tuple(ProjectDetails.model_validate(entry) for entry in raw_projects)

    duplicates = [title for title, count in Counter(p.title for p in projects).items() if count > 1]
    if duplicates:
        logger.error(f"Duplicate project titles: {duplicates}")
        raise ValueError(f"Project titles must be unique, duplicated: {', '.join(duplicates)}")

    # Distinct titles can still collapse to one anchor ("Hulak" and "hulak!")
    clashes = [slug for slug, count in Counter(p.slug for p in projects).items() if count > 1]
    if clashes:
        logger.error(f"Project titles share an anchor: {clashes}")
        raise ValueError(f"Project anchors must be unique, duplicated: {', '.join(clashes)}")

    return projects


_CONTACT_INFO = ContactInfo(email=EMAIL, github=GITHUB, linkedin=LINKEDIN)
_HERO = Hero.model_validate(HERO)
_PROJECTS = _load_projects(PROJECT_INFO)

logger.debug(f"Loaded portfolio content with {len(_PROJECTS)} projects")


def get_contact_info():
    """Return the contact email and profile links."""
    return _CONTACT_INFO


def get_hero():
    """Return the hero section shown at the top of the page."""
    return _HERO


def get_projects():
    """Return all projects in display order."""
    return _PROJECTS


def get_project(title):
    """Look up a project by its display title; None when there is no such project."""
    for project in _PROJECTS:
        if project.title == title:
            return project
    return None


def get_project_by_slug(slug):
    """Look up a project by its page anchor, e.g. "sheet-happens"."""
    for project in _PROJECTS:
        if project.slug == slug:
            return project
    return None


def export_content():
    """
    Assemble every export into one plain dict for a page-rendering layer.

    Returns:
        dict: email, github, linkedin, hero and projectInfo in export shape
    """
    return {
        "email": _CONTACT_INFO.email,
        "github": _CONTACT_INFO.github,
        "linkedin": _CONTACT_INFO.linkedin,
        "hero": _HERO.to_dict(),
        "projectInfo": [project.to_dict() for project in _PROJECTS],
    }

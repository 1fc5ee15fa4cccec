"""Template context processors for heroWarsHelper."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest


def format_title(page_title: str | None = None) -> str:
    """Format a browser page title using the site title template.

    Args:
        page_title: Specific page title, or None for the site default.

    Returns:
        `"<page> | <site>"`, or the site name when no page title is given.
    """

    if not page_title:
        return settings.SITE_NAME
    return f"{page_title} | {settings.SITE_NAME}"


def site_meta(request: HttpRequest) -> dict[str, str]:
    """Expose site naming to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `site_name`, `site_subtitle` and
        `page_title_template`, the title used by pages without their own.
    """

    return {
        "site_name": settings.SITE_NAME,
        "site_subtitle": settings.SITE_SUBTITLE,
        "page_title_template": format_title(),
    }

"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

from .._constants import TEMPLATE_VARIANTS
from .models import NavLinkConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_nav_links(entries: object) -> list[NavLinkConfig]:
    """Build navigation link configurations, preserving their order."""
    links: list[NavLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case None:
            return links
        case _:
            msg = "Navigation 'links' must be a list."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"label": label, "href": href}:
                pass
            case _:
                msg = "Navigation links require 'label' and 'href'."
                raise SiteConfigError(msg)
        label_text = _optional_str(label)
        href_text = _optional_str(href)
        if not label_text or not href_text:
            msg = "Navigation links require 'label' and 'href'."
            raise SiteConfigError(msg)
        links.append(NavLinkConfig(label=label_text, href=href_text))
    return links


def _validate_variant(value: object | None) -> str:
    """Return a known template variant name or raise ``SiteConfigError``."""
    variant = _optional_str(value) or "default"
    if variant not in TEMPLATE_VARIANTS:
        known = ", ".join(sorted(TEMPLATE_VARIANTS))
        msg = f"Unknown template variant '{variant}'. Known variants: {known}"
        raise SiteConfigError(msg)
    return variant


__all__ = ["_build_nav_links", "_optional_str", "_validate_variant"]

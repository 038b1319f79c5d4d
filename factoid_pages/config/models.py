"""Typed dataclasses describing the wallet site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_ADDRESS_BOOK_HREF, DEFAULT_OUTPUT


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class NavLinkConfig:
    """Entry in the fixed navigation menu shared by every wallet page."""

    label: str
    href: str


DEFAULT_NAV_LINKS: tuple[NavLinkConfig, ...] = (
    NavLinkConfig("Dashboard", "/index.php"),
    NavLinkConfig("Address Book", "/address-book.php"),
    NavLinkConfig("Send Factoids", "/send-factoids.php"),
    NavLinkConfig("Receive Factoids", "/receive-factoids.php"),
    NavLinkConfig("Settings", "/settings.php"),
)


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings consumed by the layout and page builders."""

    site_name: str = "Factom Wallet"
    nav_links: list[NavLinkConfig] = dc.field(
        default_factory=lambda: list(DEFAULT_NAV_LINKS)
    )
    address_book_href: str = DEFAULT_ADDRESS_BOOK_HREF
    output: Path = Path(DEFAULT_OUTPUT)
    variant: str = "default"


__all__ = ["DEFAULT_NAV_LINKS", "NavLinkConfig", "SiteConfig", "SiteConfigError"]

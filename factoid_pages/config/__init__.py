"""Load and validate the wallet site configuration.

This subpackage parses ``config/pages.yaml``, merges it over the built-in
defaults, and produces the :class:`SiteConfig` dataclass that the layout and
page builders consume. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from factoid_pages.config import SiteConfig
>>> SiteConfig().address_book_href
'/address-book.php'
"""

from .loader import load_site_config
from .models import DEFAULT_NAV_LINKS, NavLinkConfig, SiteConfig, SiteConfigError

__all__ = [
    "DEFAULT_NAV_LINKS",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]

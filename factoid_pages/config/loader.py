"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_nav_links, _optional_str, _validate_variant
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the wallet site chrome.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration. Keys missing from the file keep the
        defaults declared on :class:`SiteConfig`.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the YAML structure is not a mapping, the navigation menu is
        malformed or empty, or the template variant is unknown.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from factoid_pages.config import load_site_config
    >>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> site.nav_links[2].label  # doctest: +SKIP
    'Send Factoids'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    site_raw = loaded.get("site") or {}
    if not isinstance(site_raw, dict):
        msg = "The 'site' block must be a mapping."
        raise SiteConfigError(msg)
    return _build_site_config(site_raw)


def _build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Merge the ``site`` block over the built-in defaults."""
    base = SiteConfig()
    navigation = payload.get("navigation") or {}
    if not isinstance(navigation, dict):
        msg = "The 'navigation' block must be a mapping."
        raise SiteConfigError(msg)
    nav_links = base.nav_links
    if "links" in navigation:
        nav_links = _build_nav_links(navigation.get("links"))
        if not nav_links:
            msg = "Navigation requires at least one link."
            raise SiteConfigError(msg)

    output = _optional_str(payload.get("output"))
    return SiteConfig(
        site_name=_optional_str(payload.get("name")) or base.site_name,
        nav_links=nav_links,
        address_book_href=_optional_str(payload.get("address_book_href"))
        or base.address_book_href,
        output=Path(output) if output else base.output,
        variant=_validate_variant(payload.get("variant")),
    )


__all__ = ["load_site_config"]

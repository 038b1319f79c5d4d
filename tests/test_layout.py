"""Unit tests for the shared wallet layout."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from jinja2 import TemplateNotFound

from factoid_pages.config import NavLinkConfig, SiteConfig
from factoid_pages.layout import LayoutContext, LayoutError, LayoutRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path


def _context(**overrides: typ.Any) -> LayoutContext:
    values: dict[str, typ.Any] = {
        "page_title": "Address Book",
        "main_class": "address-book",
        "active_nav": 1,
        "main_content": '<p class="probe">Hello &amp; welcome</p>',
    }
    values.update(overrides)
    return LayoutContext(**values)


@pytest.mark.parametrize("variant", ["default", "min"])
def test_layout_highlights_active_nav(variant: str) -> None:
    """Only the navigation entry at ``active_nav`` should be marked active."""
    renderer = LayoutRenderer(SiteConfig(variant=variant))
    soup = BeautifulSoup(renderer.render(_context()), "html.parser")
    items = soup.select("nav li")
    assert len(items) == 5
    active = [
        index
        for index, item in enumerate(items)
        if "is-active" in (item.get("class") or [])
    ]
    assert active == [1], f"Expected only index 1 active, got {active!r}"
    assert items[1].a["aria-current"] == "page"
    assert items[0].a.get("aria-current") is None


def test_layout_embeds_content_verbatim() -> None:
    """Fragment HTML should not be escaped by the layout."""
    renderer = LayoutRenderer(SiteConfig())
    html = renderer.render(_context())
    assert '<p class="probe">Hello &amp; welcome</p>' in html
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one("main.address-book p.probe") is not None


def test_layout_escapes_metadata() -> None:
    """Title and class values should be autoescaped."""
    renderer = LayoutRenderer(SiteConfig(site_name="Wallet"))
    html = renderer.render(_context(page_title="<b>Bold</b>"))
    assert "<b>Bold</b>" not in html
    assert "&lt;b&gt;Bold&lt;/b&gt; | Wallet" in html


def test_layout_uses_configured_navigation() -> None:
    """Navigation links should come from the site configuration."""
    site = SiteConfig(
        nav_links=[NavLinkConfig("Home", "/"), NavLinkConfig("Keys", "/keys")]
    )
    renderer = LayoutRenderer(site)
    soup = BeautifulSoup(renderer.render(_context(active_nav=0)), "html.parser")
    hrefs = [link["href"] for link in soup.select("nav a")]
    assert hrefs == ["/", "/keys"]


@pytest.mark.parametrize("index", [-1, 5, 42])
def test_layout_rejects_out_of_range_nav(index: int) -> None:
    """An index outside the menu should raise ``LayoutError``."""
    renderer = LayoutRenderer(SiteConfig())
    with pytest.raises(LayoutError, match="out of range"):
        renderer.render(_context(active_nav=index))


def test_layout_missing_template(tmp_path: Path) -> None:
    """A templates directory without a layout should fail at construction."""
    with pytest.raises(TemplateNotFound):
        LayoutRenderer(SiteConfig(), templates_dir=tmp_path)


def test_layout_context_is_immutable() -> None:
    """Layout contexts should not be mutable after construction."""
    context = _context()
    with pytest.raises(AttributeError):
        context.active_nav = 3  # type: ignore[misc]

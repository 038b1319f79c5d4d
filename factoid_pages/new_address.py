"""New Factoid Address page rendering pipeline.

This module assembles the "New Factoid Address" page of the wallet UI. The
page offers a form for adding an address to the address book, generated at
random or derived from a private key or twelve-word phrase, and leaves
submission handling to whoever serves the page. ``NewAddressPageBuilder``
sets the fixed page metadata, renders the form fragment to a string, and
hands both to :class:`~factoid_pages.layout.LayoutRenderer` through an
explicit :class:`~factoid_pages.layout.LayoutContext`.

Typical usage mirrors the build pipeline:

>>> from factoid_pages.config import SiteConfig
>>> builder = NewAddressPageBuilder(SiteConfig())
>>> builder.metadata().active_nav
2
>>> output_path = builder.run()  # doctest: +SKIP

Rendering has no inputs beyond the site configuration, so repeated renders
return byte-identical HTML. The only side effect is the file write performed
by ``run``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import (
    GENERATE_SOURCES,
    NEW_ADDRESS_ACTIVE_NAV,
    NEW_ADDRESS_MAIN_CLASS,
    NEW_ADDRESS_TEMPLATE,
    NEW_ADDRESS_TITLE,
)
from .layout import LayoutContext, LayoutRenderer, create_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig


@dc.dataclass(slots=True, frozen=True)
class PageMetadata:
    """Page-level values the layout needs besides the body fragment."""

    page_title: str
    main_class: str
    active_nav: int


class NewAddressPageBuilder:
    """Render the New Factoid Address page from site configuration."""

    def __init__(
        self, site: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder, its Jinja environment and the layout.

        Parameters
        ----------
        site : SiteConfig
            Site configuration; supplies the address-book link, template
            variant, output path and the navigation menu used by the layout.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``factoid_pages/templates`` when not supplied.

        Notes
        -----
        The fragment template and the layout share one environment, so a
        custom ``templates_dir`` or the ``min`` variant applies to both.
        """
        self.site = site
        self.env = create_environment(site.variant, templates_dir=templates_dir)
        self.template = self.env.get_template(NEW_ADDRESS_TEMPLATE)
        self.layout = LayoutRenderer(site, env=self.env)

    @staticmethod
    def metadata() -> PageMetadata:
        """Return the fixed metadata for this page."""
        return PageMetadata(
            page_title=NEW_ADDRESS_TITLE,
            main_class=NEW_ADDRESS_MAIN_CLASS,
            active_nav=NEW_ADDRESS_ACTIVE_NAV,
        )

    def render_fragment(self) -> str:
        """Return the body fragment embedded into the layout's ``<main>``."""
        return self.template.render(
            heading=NEW_ADDRESS_TITLE,
            address_book_href=self.site.address_book_href,
            generate_sources=GENERATE_SOURCES,
        )

    def layout_context(self) -> LayoutContext:
        """Combine the page metadata with a freshly rendered fragment."""
        meta = self.metadata()
        return LayoutContext(
            page_title=meta.page_title,
            main_class=meta.main_class,
            active_nav=meta.active_nav,
            main_content=self.render_fragment(),
        )

    def render(self) -> str:
        """Return the complete HTML document for the page."""
        return self.layout.render(self.layout_context())

    def run(self) -> Path:
        """Render and write the page HTML, returning the output path.

        Returns
        -------
        Path
            Filesystem path to the rendered HTML file.

        Notes
        -----
        Parent directories are created as needed and the output always ends
        with a newline. Filesystem errors propagate to the caller.
        """
        output_path = self.site.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.render()
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path


def render_new_address_page(
    site: SiteConfig, *, templates_dir: Path | None = None
) -> str:
    """Return the full New Factoid Address document for ``site``."""
    return NewAddressPageBuilder(site, templates_dir=templates_dir).render()


__all__ = ["NewAddressPageBuilder", "PageMetadata", "render_new_address_page"]

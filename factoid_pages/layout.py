"""Shared wallet page layout.

Every wallet page is assembled in two steps: the page renders its body
fragment to a string, then the layout wraps that fragment with the document
head, the navigation menu and the ``<main>`` wrapper. The layout receives its
inputs through an explicit :class:`LayoutContext` rather than reading
variables that happen to be in scope, so a page cannot forget one of them.

>>> from factoid_pages.config import SiteConfig
>>> renderer = LayoutRenderer(SiteConfig())
>>> html = renderer.render(
...     LayoutContext("Dashboard", "dashboard", 0, "<p>Hello</p>")
... )
>>> "<p>Hello</p>" in html
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import LAYOUT_TEMPLATE, TEMPLATE_VARIANTS
from .config.helpers import _validate_variant

if typ.TYPE_CHECKING:
    from .config import SiteConfig

TEMPLATES_DIR = Path(__file__).parent / "templates"


class LayoutError(ValueError):
    """Raised when a layout context cannot be rendered against the site."""


@dc.dataclass(slots=True, frozen=True)
class LayoutContext:
    """Values the layout needs to wrap a page fragment.

    Attributes
    ----------
    page_title : str
        Title shown in ``<title>``.
    main_class : str
        CSS class applied to the ``<main>`` element.
    active_nav : int
        Zero-based index of the highlighted navigation entry.
    main_content : str
        Pre-rendered HTML fragment, embedded without escaping.
    """

    page_title: str
    main_class: str
    active_nav: int
    main_content: str


def create_environment(
    variant: str = "default", *, templates_dir: Path | None = None
) -> Environment:
    """Return a Jinja environment rooted at the templates for ``variant``.

    Raises
    ------
    SiteConfigError
        If ``variant`` is not a known template variant.
    """
    root = templates_dir or TEMPLATES_DIR
    subdir = TEMPLATE_VARIANTS[_validate_variant(variant)]
    if subdir:
        root = root / subdir
    return Environment(
        loader=FileSystemLoader(str(root)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class LayoutRenderer:
    """Render full wallet documents around page fragments."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        env: Environment | None = None,
    ) -> None:
        """Initialize the renderer and load the layout template.

        Parameters
        ----------
        site : SiteConfig
            Site configuration providing the site name and navigation menu.
        templates_dir : Path, optional
            Directory holding the templates. Defaults to
            ``factoid_pages/templates``; the ``min`` variant reads from its
            ``min`` subdirectory.
        env : Environment, optional
            Pre-built Jinja environment, shared with a page builder so both
            read templates from the same place.
        """
        self.site = site
        self.env = env or create_environment(site.variant, templates_dir=templates_dir)
        self.template = self.env.get_template(LAYOUT_TEMPLATE)

    def render(self, context: LayoutContext) -> str:
        """Return the complete HTML document for ``context``.

        Raises
        ------
        LayoutError
            If ``context.active_nav`` does not index the navigation menu.
        """
        nav_links = self.site.nav_links
        if not 0 <= context.active_nav < len(nav_links):
            msg = (
                f"Navigation index {context.active_nav} is out of range for "
                f"{len(nav_links)} navigation links."
            )
            raise LayoutError(msg)
        return self.template.render(
            site_name=self.site.site_name,
            nav_links=nav_links,
            page_title=context.page_title,
            main_class=context.main_class,
            active_nav=context.active_nav,
            main_content=context.main_content,
        )


__all__ = [
    "TEMPLATES_DIR",
    "LayoutContext",
    "LayoutError",
    "LayoutRenderer",
    "create_environment",
]

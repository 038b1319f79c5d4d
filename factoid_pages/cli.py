"""Cyclopts CLI entrypoint for rendering the Factoid wallet pages.

The ``pages`` console script defined here renders the New Factoid Address page
either to disk (``pages generate``) or to stdout (``pages show``). Site chrome
comes from ``config/pages.yaml`` when it exists and from the built-in defaults
otherwise.

Examples
--------
Render the page with the default configuration:

>>> from factoid_pages.cli import main
>>> main()  # doctest: +SKIP

Render the minimal template set into a custom location:

>>> from factoid_pages.cli import app
>>> app(["generate", "--min", "--output", "dist/new.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .new_address import NewAddressPageBuilder

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_site_config(
    config: Path | None, *, output: Path | None = None, minimal: bool = False
) -> SiteConfig:
    """Load the site config and apply command-line overrides.

    An explicitly supplied ``config`` must exist; the default path is optional
    and falls back to built-in defaults when absent.
    """
    if config is not None:
        site = load_site_config(config)
    elif DEFAULT_CONFIG.exists():
        site = load_site_config(DEFAULT_CONFIG)
    else:
        site = SiteConfig()
    if output is not None:
        site = dc.replace(site, output=output)
    if minimal:
        site = dc.replace(site, variant="min")
    return site


@app.command(help="Render the New Factoid Address page to an HTML file.")
def generate(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    minimal: typ.Annotated[
        bool, Parameter(name="--min", help="Use the minimal template set")
    ] = False,
) -> None:
    """Render the page and write it to the configured output path.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``pages.yaml`` configuration file. When ``None``,
        ``config/pages.yaml`` is used if present, otherwise built-in defaults.
    output : Path or None, optional
        Override for the output file path.
    minimal : bool, optional
        Render with the ``min`` template variant.

    Raises
    ------
    FileNotFoundError
        If an explicitly supplied ``config`` does not exist.
    SiteConfigError
        If the configuration is malformed.
    """
    site = _resolve_site_config(config, output=output, minimal=minimal)
    written = NewAddressPageBuilder(site).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the rendered New Factoid Address page to stdout.")
def show(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    minimal: typ.Annotated[
        bool, Parameter(name="--min", help="Use the minimal template set")
    ] = False,
) -> None:
    """Render the page and print the HTML document."""
    site = _resolve_site_config(config, minimal=minimal)
    print(NewAddressPageBuilder(site).render(), end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

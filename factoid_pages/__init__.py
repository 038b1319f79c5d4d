"""Static page generation for the Factoid wallet web UI.

This package renders wallet pages by capturing a page's body fragment and
wrapping it in the shared site layout. The CLI entry points back the
``pages`` console script.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``NewAddressPageBuilder``: Builder for the New Factoid Address page.

Examples
--------
>>> from factoid_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .new_address import NewAddressPageBuilder

__all__ = ["NewAddressPageBuilder", "app", "main"]

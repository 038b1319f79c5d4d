"""Common literal values used across factoid_pages.

These constants keep page metadata and form choices centralized so templates,
builders, and tests can import the same values without drifting. Intended for
internal use within the factoid_pages package.

Examples
--------
>>> from factoid_pages import _constants
>>> _constants.NEW_ADDRESS_TITLE
'New Factoid Address'
>>> [value for value, _label in _constants.GENERATE_SOURCES]
['random', 'private-key', 'twelve-words']
"""

NEW_ADDRESS_TITLE = "New Factoid Address"
NEW_ADDRESS_MAIN_CLASS = "send-factoids"
NEW_ADDRESS_ACTIVE_NAV = 2
NEW_ADDRESS_TEMPLATE = "new_address_factoid.jinja"
LAYOUT_TEMPLATE = "template.jinja"

# Order matters: the first entry is the default selection.
GENERATE_SOURCES: tuple[tuple[str, str], ...] = (
    ("random", "Random new address"),
    ("private-key", "Private key"),
    ("twelve-words", "Twelve words"),
)

DEFAULT_ADDRESS_BOOK_HREF = "/address-book.php"
DEFAULT_OUTPUT = "public/new-address-factoid.html"
TEMPLATE_VARIANTS: dict[str, str] = {"default": "", "min": "min"}

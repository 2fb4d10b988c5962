"""Common literal values used across ngscaffold.

These constants keep file suffixes, sentinel slugs, and naming qualifiers
centralized so the name deriver, templates, and tests agree on the same
values. Intended for internal use within the ngscaffold package.

Examples
--------
>>> from ngscaffold import _constants
>>> _constants.COMPONENT_SUFFIX
'.component'
>>> _constants.HOME_SLUG
'home'
"""

DEFAULT_MAPPING = "mapping.json"

HOME_SLUG = "home"
HOME_LABEL = "Home"
BRAND_LABEL = "Logo"

SELECTOR_PREFIX = "app"
PAGE_PREFIX = "page"
PAGE_CLASS_QUALIFIER = "Page"
CLASS_SUFFIX = "Component"

COMPONENT_SUFFIX = ".component"
SOURCE_EXTENSION = ".ts"

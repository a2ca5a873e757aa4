"""Package-wide constants.

Keeps the default option values and settings locations in one place.
"""

# Slug generation
DEFAULT_SEPARATOR = "-"  # Joins words inside a slug and the uniqueness suffix
RESERVED_BUMP_SUFFIX = "1"  # Appended once when a slug hits a reserved word
SOURCE_JOINER = " "  # Joins multiple source components before slugging

# Soft deletes
DEFAULT_DELETED_AT_COLUMN = "deleted_at"

# Settings
DEFAULT_SETTINGS_PATH = "config/sluggable.yaml"
DATABASE_URL_ENV = "SLUGGABLE_DATABASE_URL"

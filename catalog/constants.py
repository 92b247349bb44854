"""
Application-level constants for hardcoded catalog behavior.

These values describe the catalog data model itself and should NEVER be
changed via environment variables. For configurable values (database URL,
logging, URL prefix, etc.), see catalog/settings.py.
"""

# ============================================================================
# Field limits
# ============================================================================

# Maximum length of author first/family names (varchar column size)
AUTHOR_NAME_MAX_LENGTH = 100

# Genre name bounds; the lower bound is also a form rule, both are
# enforced by a CHECK constraint on the genre table
GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 100


# ============================================================================
# Book instance status
# ============================================================================

STATUS_AVAILABLE = "Available"
STATUS_MAINTENANCE = "Maintenance"
STATUS_LOANED = "Loaned"
STATUS_RESERVED = "Reserved"

BOOK_INSTANCE_STATUSES = (
    STATUS_AVAILABLE,
    STATUS_MAINTENANCE,
    STATUS_LOANED,
    STATUS_RESERVED,
)


# ============================================================================
# Date rendering
# ============================================================================

# Medium date format used for lifespans and due dates, e.g. "Jan 5, 1775"
MEDIUM_DATE_FORMAT = "{month} {day}, {year}"

# English month abbreviations, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Separator between the birth and death segments of an author lifespan
LIFESPAN_SEPARATOR = " - "

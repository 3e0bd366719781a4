"""Internal constants shared across the library."""

SITE_BASE_URL = "https://proleadventures.com"
USER_AGENT = "pyprole/1"

# ------------------------------------------------------------------
# Display policy
# ------------------------------------------------------------------

REDACTED_DESCRIPTION = "CLASSIFIED MISSION - INTEL LOCKED"
DEFAULT_JITTER_AMOUNT = 0.02
# Both axis deltas below this are treated as "exact coordinates leaked".
LEAK_THRESHOLD_DEGREES = 0.001

# ------------------------------------------------------------------
# Hosted store (PostgREST)
# ------------------------------------------------------------------

REST_PATH = "/rest/v1"
ADVENTURES_TABLE = "adventures"
CONTACT_TABLE = "contact_messages"
NEWSLETTER_TABLE = "newsletter_signups"

UNIQUE_VIOLATION_CODE = "23505"
# PostgREST code for `.single()` matching zero (or many) rows.
SINGLE_ROW_CODE = "PGRST116"
DUPLICATE_MESSAGE_MARKERS: tuple[str, ...] = ("duplicate", "already exists")

SUPABASE_HOST_MARKERS: tuple[str, ...] = ("supabase.co", "supabase.com")
PLACEHOLDER_URL_MARKERS: tuple[str, ...] = ("your-project", "placeholder")
PLACEHOLDER_KEY_MARKERS: tuple[str, ...] = ("your-anon-key",)

"""Fixed taxonomies shared by input validation and the aggregation engine.

Any change here applies to both sides at once: the engine never discovers
locations or categories from the data.
"""

LOCATIONS = (
    "Flatiron",
    "MidEast",
    "Midtown",
    "UWS",
    "Back Bay",
    "North Station",
    "Miami Beach",
    "eStore",
    "Location 9",
    "Location 10",
)

# Filter value meaning "every location the caller may see"
ALL_LOCATIONS = "all"

PRODUCT_CATEGORIES = (
    "skincare",
    "supplements",
    "devices",
    "gift_cards",
    "other",
)

SERVICE_TYPES = (
    "botox",
    "dysport",
    "filler",
    "sculptra",
    "laser_genesis",
    "hydrafacial",
    "chemical_peel",
    "microneedling",
    "prp",
    "consultation",
    "other_services",
)

NOTE_PRIORITIES = ("low", "medium", "high")

AUDIT_ACTIONS = (
    "create",
    "update",
    "delete",
    "login",
    "logout",
    "user_created",
    "user_updated",
)

AUDIT_ENTITY_TYPES = ("SalesRecord", "Note", "User")

# Document store collection names
SALES_RECORDS_COLLECTION = "salesRecords"
NOTES_COLLECTION = "notes"
USERS_COLLECTION = "users"
AUDIT_LOGS_COLLECTION = "auditLogs"

# Keys of the singleton settings documents
LOCATION_GOALS_KEY = "locationGoals"
LOCATION_SETTINGS_KEY = "locationSettings"

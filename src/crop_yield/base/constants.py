"""
Common constants for crop yield data processing.
"""

# Generic column names used across all countries
COUNTRY_COLUMN = "country"
YEAR_COLUMN = "year"
CROP_COLUMN = "crop"
AREA_COLUMN = "area"
PRODUCTION_COLUMN = "production"
YIELD_COLUMN = "yield"

# Fallback value for numeric fields that do not parse to a finite number
NUMERIC_FALLBACK = 0.0

# Year key for records whose year text has no 4-digit run
MISSING_YEAR_KEY = ""

"""Constants used throughout the project"""

# Data directory
DATA_DIR = "data"
COUNTRY_SUBDIR = "india"

# Source dataset
DEFAULT_SOURCE = "https://manufac-analytics.github.io/Manufac_IndiaAgroDataset.json"
DOWNLOAD_CHUNK_SIZE = 8192  # Bytes for file downloads
REQUEST_TIMEOUT_SECONDS = 30.0

# Display
DISPLAY_DECIMAL_PLACES = 2

# Output formats
OUTPUT_FORMAT_CSV = "csv"
OUTPUT_FORMAT_PARQUET = "parquet"

# Default values for CLI (only place defaults are allowed)
DEFAULT_OUTPUT_FORMAT = OUTPUT_FORMAT_CSV

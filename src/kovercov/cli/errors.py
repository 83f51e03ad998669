# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_THRESHOLD = 3  # A coverage threshold failed; 2 is left to click usage errors
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed XML)
EXIT_NOINPUT = 66  # Input file not found (e.g., report.xml missing)
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml)

"""
Default configuration values for locatorkit.
"""

# Query synthesis defaults
DEFAULT_PREFER_CSS = False
DEFAULT_CONVERT_REGEXP_TO_CONTAINS = True

# Environment
ENV_PREFIX = "LOCATORKIT_"

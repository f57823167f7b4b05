"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in the application's config/ modules
"""

# ============================================================================
# RESPONSE DEFAULTS
# ============================================================================

# Buffer headers and body until the composer is flushed
DEFAULT_OUTPUT_LATE = True

DEFAULT_CONTENT_TYPE = 'text/html; charset=utf-8'
DEFAULT_JSON_CONTENT_TYPE = 'application/json'

# Event fired right before a composer emits
DEFAULT_OUTPUT_EVENT = 'output'

# ============================================================================
# TEMPLATE DEFAULTS
# ============================================================================

DEFAULT_TEMPLATE_DIR = 'views'
DEFAULT_TEMPLATE_EXTENSION = '.html'
DEFAULT_TEMPLATE_SEPARATOR = '/'

# Controller used when a route name carries no controller segment
DEFAULT_CONTROLLER = 'index'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

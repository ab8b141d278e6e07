"""Canonical logging field names.

Keeping names in one place prevents drift between the formatter output and the
context keys bound by envelope and paging helpers.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Envelope fields.
CORRELATION_ID = "correlation_id"

# Paging fields.
REQUESTED_PAGE_NUMBER = "requested_page_number"
PAGE_NUMBER = "page_number"
TOTAL_PAGES = "total_pages"

# Event names.
FAILURE_WITHOUT_ERROR_EVENT = "failure_without_error_info"
PAGE_CLAMPED_EVENT = "page_number_clamped"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

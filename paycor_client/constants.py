"""
Constants for the Paycor client library.
"""

# Fixed API host (paths are appended directly, no version prefix)
PAYCOR_HOST = "https://secure.paycor.com"

# HTTP Headers
HEADER_PAYCOR_AUTH = "paycorapi"
HEADER_DATE = "Date"
HEADER_CONTENT_TYPE = "Content-Type"

JSON_CONTENT_TYPE = "application/json"

# Code reported for anything that is not a parsable server reply
TRANSPORT_ERROR_CODE = 500
UNPARSABLE_CONTENT_MESSAGE = "Server returned unparsable content."

DEFAULT_TIMEOUT = 30  # seconds

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': PAYCOR_HOST,
    'timeout': DEFAULT_TIMEOUT,  # handed to the default transport
}

# Environment variables
ENV_BASE_URL = "FLUENTHTTP_URL"
ENV_ACCESS_TOKEN = "FLUENTHTTP_ACCESS_TOKEN"
ENV_TIMEOUT = "FLUENTHTTP_TIMEOUT"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_PLAIN = "text/plain"

# Status codes
SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 399
TIMEOUT_STATUS_CODE = 408
# no HTTP response at all, as reported by browsers for aborted requests
NETWORK_ERROR_STATUS_CODE = 0

DEFAULT_TIMEOUT = 30.0

PACKAGE_NAME = "fluenthttp"

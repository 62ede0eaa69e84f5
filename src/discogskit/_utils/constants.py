# Environment variables
ENV_DISCOGS_TOKEN = "DISCOGS_TOKEN"
ENV_CONSUMER_KEY = "DISCOGS_CONSUMER_KEY"
ENV_CONSUMER_SECRET = "DISCOGS_CONSUMER_SECRET"
ENV_OAUTH_TOKEN = "DISCOGS_OAUTH_TOKEN"
ENV_OAUTH_TOKEN_SECRET = "DISCOGS_OAUTH_TOKEN_SECRET"

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# Defaults
DEFAULT_DOMAIN = "discogs.com"
DEFAULT_ABOUT_URL = "https://github.com/lumaa-dev/DiscogsKit"

# OAuth 1.0a
OAUTH_SIGNATURE_METHOD = "PLAINTEXT"
OAUTH_VERSION = "1.0"

# CLI identity
SDK_NAME = "discogskit"
SDK_VERSION = "0.1.0"

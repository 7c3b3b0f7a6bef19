# Path parameters
RAW_URL_KEY = "request-raw-url"
BASE_URL_KEY = "baseurl"
BASE_URL_TOKEN = "{+baseurl}"

# Headers
HEADER_CONTENT_TYPE = "content-type"

# Content types
BINARY_CONTENT_TYPE = "application/octet-stream"
JSON_CONTENT_TYPE = "application/json"

# Query parameter bindings
QUERY_PARAMETERS_ATTRIBUTE = "__query_parameters__"
QUERY_PARAMETER_METADATA_KEY = "query_parameter"

PROVIDER_REQUEST_ERROR_MESSAGE = "provider request {0} {1} failed with status {2} : {3}"

PROVIDER_CONNECTION_ERROR_MESSAGE = "provider request {0} {1} failed : {2}"

MISSING_ACCESS_TOKEN_MESSAGE = "provider access token is missing, set the {0} environment variable"

UNEXPECTED_PROVIDER_RESPONSE_MESSAGE = "unexpected provider response for {0} : {1}"

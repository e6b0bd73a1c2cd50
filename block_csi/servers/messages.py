VALIDATION_EXCEPTION_MESSAGE = "Validation error has occurred : {0}"

WRONG_ID_FORMAT_MESSAGE = "Wrong {0} id format : {1}"

INVALID_LISTING_TOKEN_MESSAGE = "invalid starting token : {0}, expected a page number"

VOLUME_SIZE_OUT_OF_RANGE_MESSAGE = "requested size {0} bytes is out of the supported range [{1}, {2}] bytes"

DUPLICATE_VOLUME_NAME_MESSAGE = "fatal issue: duplicate volume {0} exists, {1} volumes share the name"

VOLUME_NOT_OWNED_MESSAGE = "fatal issue: volume {0} ({1}) was not created by CSI"

REQUEST_CANCELLED_MESSAGE = "request was cancelled by the caller during {0}"

DEADLINE_EXCEEDED_MESSAGE = "request deadline expired during {0}, no time is left for a provider call"

# validation error messages
CAPABILITIES_NOT_SET_MESSAGE = "capabilities were not set"
UNSUPPORTED_ACCESS_MODE_MESSAGE = "unsupported access mode : {}"
PARAMETER_SHOULD_NOT_BE_EMPTY_MESSAGE = '{} should not be empty'
CAPACITY_RANGE_NOT_EXACT_MESSAGE = 'required bytes : {0} and limit bytes : {1} are not the same'
SIZE_SHOULD_NOT_BE_NEGATIVE_MESSAGE = 'size should not be negative'
MAX_ENTRIES_SHOULD_NOT_BE_NEGATIVE_MESSAGE = 'max entries should not be negative'
PLUGIN_INFO_MISSING_MESSAGE = "plugin name or version cannot be empty"

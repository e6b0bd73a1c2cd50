import block_csi.servers.messages as messages


class BaseControllerServerException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


class ValidationException(BaseControllerServerException):

    def __init__(self, msg):
        super().__init__()
        self.message = messages.VALIDATION_EXCEPTION_MESSAGE.format(msg)


class InvalidNodeId(BaseControllerServerException):

    def __init__(self, node_id):
        super().__init__()
        self.message = messages.WRONG_ID_FORMAT_MESSAGE.format("node", node_id)


class InvalidListingToken(BaseControllerServerException):

    def __init__(self, starting_token):
        super().__init__()
        self.message = messages.INVALID_LISTING_TOKEN_MESSAGE.format(starting_token)


class VolumeSizeOutOfRange(BaseControllerServerException):

    def __init__(self, size_in_bytes, min_size_in_bytes, max_size_in_bytes):
        super().__init__()
        self.message = messages.VOLUME_SIZE_OUT_OF_RANGE_MESSAGE.format(size_in_bytes, min_size_in_bytes,
                                                                        max_size_in_bytes)


class DuplicateVolumeNameError(BaseControllerServerException):

    def __init__(self, volume_name, volumes_count):
        super().__init__()
        self.message = messages.DUPLICATE_VOLUME_NAME_MESSAGE.format(volume_name, volumes_count)


class VolumeNotOwnedError(BaseControllerServerException):

    def __init__(self, volume_name, description):
        super().__init__()
        self.message = messages.VOLUME_NOT_OWNED_MESSAGE.format(volume_name, description)


class RequestCancelledError(BaseControllerServerException):

    def __init__(self, method_name):
        super().__init__()
        self.message = messages.REQUEST_CANCELLED_MESSAGE.format(method_name)


class DeadlineExceededError(BaseControllerServerException):

    def __init__(self, method_name):
        super().__init__()
        self.message = messages.DEADLINE_EXCEEDED_MESSAGE.format(method_name)

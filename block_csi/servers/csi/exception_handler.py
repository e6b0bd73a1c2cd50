import grpc

import block_csi.provider.errors as provider_errors
from block_csi.common.csi_logger import get_stdout_logger
from block_csi.provider.error_classifier import classify_provider_error, ProviderErrorClass
from block_csi.servers import errors as controller_errors

logger = get_stdout_logger()

status_codes_by_exception = {
    NotImplementedError: grpc.StatusCode.UNIMPLEMENTED,
    controller_errors.ValidationException: grpc.StatusCode.INVALID_ARGUMENT,
    controller_errors.InvalidNodeId: grpc.StatusCode.INVALID_ARGUMENT,
    controller_errors.InvalidListingToken: grpc.StatusCode.ABORTED,
    controller_errors.VolumeSizeOutOfRange: grpc.StatusCode.OUT_OF_RANGE,
    controller_errors.VolumeNotOwnedError: grpc.StatusCode.ALREADY_EXISTS,
    controller_errors.DuplicateVolumeNameError: grpc.StatusCode.INTERNAL,
    controller_errors.RequestCancelledError: grpc.StatusCode.CANCELLED,
    controller_errors.DeadlineExceededError: grpc.StatusCode.DEADLINE_EXCEEDED,
    provider_errors.MissingAccessTokenError: grpc.StatusCode.UNAUTHENTICATED,
}

status_codes_by_provider_error_class = {
    ProviderErrorClass.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ProviderErrorClass.TRANSIENT: grpc.StatusCode.UNAVAILABLE,
    ProviderErrorClass.PERMANENT: grpc.StatusCode.FAILED_PRECONDITION,
    ProviderErrorClass.ALREADY_IN_DESIRED_STATE: grpc.StatusCode.FAILED_PRECONDITION,
    ProviderErrorClass.UNKNOWN: grpc.StatusCode.INTERNAL,
}


def get_status_code(exception):
    if isinstance(exception, provider_errors.ProviderError):
        return status_codes_by_provider_error_class[classify_provider_error(exception)]
    return status_codes_by_exception.get(type(exception), grpc.StatusCode.INTERNAL)


def _build_non_ok_response(message, context, status_code, response_type):
    context.set_details(message)
    context.set_code(status_code)
    return response_type()


def build_error_response(message, context, status_code, response_type):
    logger.error(message)
    return _build_non_ok_response(message, context, status_code, response_type)


def handle_exception(exception, context, status_code, response_type):
    logger.exception(exception)
    return _build_non_ok_response(str(exception), context, status_code, response_type)


def handle_common_exceptions(controller_method, servicer, request, context, response_type):
    try:
        return controller_method(servicer, request, context)
    except Exception as exception:
        return handle_exception(exception, context, get_status_code(exception), response_type)

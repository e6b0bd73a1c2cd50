from decorator import decorator

from block_csi.common.csi_logger import get_stdout_logger
from block_csi.common.utils import set_current_thread_name
from block_csi.servers.csi.exception_handler import handle_common_exceptions

logger = get_stdout_logger()


def csi_method(error_response_type, thread_name_request_attribute=''):
    """
    Wraps a CSI handler so that every exception it raises ends as a non OK status on the context and an
    empty response of error_response_type.

    Requests for the same volume are not serialized, concurrent calls reach the provider as they come.
    """
    @decorator
    def call_csi_method(controller_method, servicer, request, context):
        thread_name = getattr(request, thread_name_request_attribute, None) if thread_name_request_attribute else None
        set_current_thread_name(thread_name)
        controller_method_name = controller_method.__name__
        logger.info(controller_method_name)
        response = handle_common_exceptions(controller_method, servicer, request, context, error_response_type)
        logger.info("finished {}".format(controller_method_name))
        return response

    return call_csi_method

import threading


def set_current_thread_name(name):
    """
    Sets current thread name if name is not None or empty string

    Args:
        name : name to set
    """
    if name:
        current_thread = threading.current_thread()
        current_thread.name = name


def get_request_timeout(context, default_timeout):
    """
    Args:
        context         : grpc servicer context of the running request
        default_timeout : seconds to use when the caller did not set a deadline
    Return
        seconds left for an outbound call, bounded by the caller's deadline
    """
    time_remaining = context.time_remaining() if context is not None else None
    if time_remaining is None:
        return default_timeout
    return max(min(time_remaining, default_timeout), 0)

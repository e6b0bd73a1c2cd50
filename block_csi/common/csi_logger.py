import logging
import sys

LOGGER_NAME = "block_csi"

logger_properties = {
    'log_level': 'DEBUG',
    'entry': '%(asctime)s %(levelname)s\t[%(threadName)s] '
             '(%(module)s:%(funcName)s:%(lineno)d) - %(message)s'
}


def get_stdout_logger():
    """
    Returns the controller logger. The stdout handler is attached once, on first use.
    Request handlers rename their thread after the volume they work on, so the thread
    name in each entry identifies the volume.
    """
    csi_logger = logging.getLogger(LOGGER_NAME)

    if not getattr(csi_logger, 'handler_set', None):
        csi_logger.setLevel(logger_properties['log_level'])
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(logger_properties['entry']))
        csi_logger.addHandler(handler)
        csi_logger.propagate = False

        csi_logger.handler_set = True

    return csi_logger


def set_log_level(log_level_to_set):
    """
    Args:
        log_level_to_set : level name (debug, info, warning, error, critical). None keeps the current level.

    Raises:
        ValueError : unknown level name
    """
    if not log_level_to_set:
        return
    level_name = log_level_to_set.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError("unknown log level : {}".format(log_level_to_set))
    logger_properties['log_level'] = level_name
    logging.getLogger(LOGGER_NAME).setLevel(level_name)

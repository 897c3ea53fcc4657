"""Error reporting shared by the canvas host and the config layer"""
import logging
import sys

logger = logging.getLogger(__name__)

# Running from source re-raises immediately; a frozen build reports first
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None


def set_main_window(window):
    """Register the window that owns error popups (None to unregister)"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception, then re-raise it.

    Args:
        e: The exception being handled
        user_message: Text for the popup; defaults to str(e)
        title: Popup window title

    From source (DEBUG_MODE) the exception propagates untouched so the
    traceback is the first thing a developer sees. In a frozen build it is
    logged with its traceback and shown in a critical QMessageBox over the
    registered window before propagating.
    """
    if DEBUG_MODE:
        raise e

    message = user_message if user_message else str(e)
    logger.error("%s: %s", title, message, exc_info=e)

    if _main_window is None:
        logger.error("No window registered for error popup '%s'", title)
    else:
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)

    raise e

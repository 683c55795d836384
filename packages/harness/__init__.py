from .core import play, welcome_message, outcome_message, result_message
from .io import write_csv, write_manifest
from .logs import configure_logging

__all__ = ["play", "welcome_message", "outcome_message", "result_message",
           "write_csv", "write_manifest", "configure_logging"]

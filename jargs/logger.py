# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for jargs."""
import logging

logger: logging.Logger = logging.getLogger("jargs")

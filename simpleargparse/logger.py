# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""Package logger for SimpleArgParse."""
import logging

logger: logging.Logger = logging.getLogger("simpleargparse")

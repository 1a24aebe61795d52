"""
sitescribe_logs - Markdown run reports for processed commands

Usage:
    from sitescribe_logs import create_run_logger

    run_logger = create_run_logger("add a contact form", path="./site")
    run_logger.log_heading("Index")
    run_logger.finalize(success=True)
"""

from .run_logger import RunLogger, create_run_logger

__all__ = [
    'RunLogger',
    'create_run_logger',
]

__version__ = '1.0.0'

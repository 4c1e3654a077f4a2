"""
utils - Логирование, обработка ошибок и мониторинг.
"""

from .logging import SolverLogger, get_logger, remove_handler, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, IllegalMoveError, validate_board
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'SolverLogger', 'get_logger', 'remove_handler', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'IllegalMoveError', 'validate_board',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]

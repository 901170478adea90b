"""
Utility functions and helpers.
"""

from .logging_config import configure_logging, SUCCESS
from .path_utils import ensure_dir_exists, PROJECT_ROOT, OUTPUT_DIR

__all__ = ['configure_logging', 'SUCCESS', 'ensure_dir_exists', 'PROJECT_ROOT', 'OUTPUT_DIR']

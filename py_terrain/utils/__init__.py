"""
Shared utilities: entropy sources and logging setup.
"""

from .random import EntropySource, SystemEntropy, SeededEntropy, INT32_MAX
from .logging import configure_logging

__all__ = ['EntropySource', 'SystemEntropy', 'SeededEntropy', 'INT32_MAX',
           'configure_logging']

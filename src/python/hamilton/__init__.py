"""
===============================================================================
HAMILTON - Quaternion Algebra Engine
===============================================================================
Hamilton quaternions as Cayley-Dickson pairs of complex numbers.

Submodules:
    quaternion -- The Hamilton value type, canonical constants, algebra,
                  quadrance and division, hyperspherical coordinates
    formatting -- "(a+bi+cj+dk)" text rendering
    config     -- YAML configuration and logging setup
===============================================================================
"""

from hamilton.quaternion import Hamilton, DivideByZeroError, ZERO, ONE, I, J, K
from hamilton.formatting import format_hamilton
from hamilton.config import HamiltonConfig, load_config, setup_logging

__version__ = '1.0.0'

__all__ = [
    'Hamilton',
    'DivideByZeroError',
    'ZERO',
    'ONE',
    'I',
    'J',
    'K',
    'format_hamilton',
    'HamiltonConfig',
    'load_config',
    'setup_logging',
]

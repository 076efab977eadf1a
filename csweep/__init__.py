"""
C Function Sweeper - Find unused or undeclared functions in C codebases.
"""

__version__ = "0.1.0"

from csweep.core.registry import FunctionRegistry
from csweep.core.sweeper import FunctionSweeper

__all__ = ["FunctionRegistry", "FunctionSweeper"]

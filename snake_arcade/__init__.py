"""Snake on a fixed grid, built on pygame"""

__version__ = "1.0.0"

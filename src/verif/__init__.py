"""
Verif: component dependency analyzer for Vue single-file components.
"""

__version__ = "0.1.0"

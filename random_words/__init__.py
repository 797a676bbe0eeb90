"""
Random Words - vocabulary drill with ranged random sampling over word lists
"""

__version__ = "1.0.0"
__description__ = "Drill vocabulary from frequency-ordered word lists"

# Export main factory functions for easy access
from .core.factory import create_drill_controller, create_list_editor

__all__ = ["create_drill_controller", "create_list_editor"]

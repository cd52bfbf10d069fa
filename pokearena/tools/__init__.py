"""Tool boundary: argument models, registry and text rendering."""
from .registry import Toolkit, ToolSpec, TOOLS
__all__ = ["Toolkit","ToolSpec","TOOLS"]

"""Two-input logic gates, a scene model, wire routing and gate symbols."""

__version__ = "0.1.0"
__all__ = ["__version__"]
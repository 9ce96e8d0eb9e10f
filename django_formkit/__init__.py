"""
Composable view components for rendering model-bound HTML forms in Django.
"""

__version__ = "0.1.0"

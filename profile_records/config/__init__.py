"""
Configuration module for profile widgets.

Provides:
- YAML config loading
- Widget definitions
- Environment variable substitution
"""

from .loader import ConfigLoader, WidgetConfig, load_widget, load_widgets

__all__ = ["ConfigLoader", "WidgetConfig", "load_widget", "load_widgets"]

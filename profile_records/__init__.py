"""
Profile Records - profile page widgets for research grants and publications.

Architecture:
- core/: Stable foundation (models, relay client, selectors, classifiers)
- parsers/: Extraction strategies (grants listing, publications listing)
- render/: Jinja2 templates for the modal fragments
- config/: YAML-driven widget definitions
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

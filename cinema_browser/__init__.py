"""
Top-level package for the Cinema database browser.

This package exposes the core linking engine and its plugins.
Most code should import from submodules such as:
    cinema_browser.core
    cinema_browser.loaders
    cinema_browser.builders
    cinema_browser.ui
"""

__all__: list[str] = []

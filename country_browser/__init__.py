"""
Top-level package for the country browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    country_browser.core
    country_browser.services
    country_browser.ui
"""

__all__: list[str] = []

"""
Top‑level package for the home services booking core.

This file makes ``home_booking`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``home_booking.app.main``.  The package re-exports nothing; all
functionality lives in submodules under ``app``.
"""

__all__ = []

"""
Application package initializer.

The code is split by concern: ``core`` (settings, logging, storage,
clock), ``schemas`` (entity models), ``repositories`` (persistence and
the work catalog) and ``services`` (booking, payment and customer
logic).  ``main.create_app`` wires them together and ``cli`` exposes
them on the command line.
"""

from .main import BookingApp, build_app, create_app  # noqa: F401

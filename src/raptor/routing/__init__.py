"""Routing — path templates, argument inference, and per-resource routers.

Route tables are declared once at startup and read-only afterwards.
"""

from raptor.routing.router import Router, routes

__all__ = ["Router", "routes"]

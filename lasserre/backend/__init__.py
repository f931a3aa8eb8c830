"""
lasserre/backend/__init__.py

Broadcast imports for the backend.
"""

from ..exceptions import InfeasibleRegionError, UnboundedRegionError

backend = None
"""
Global repository for the active backend.
"""

"""
lasserre/__init__.py

Top-level imports for `lasserre`.
"""

import lasserre.polytopes

from lasserre.backend.cdd_backend import CDDBackend
import lasserre.backend

lasserre.backend.backend = CDDBackend()

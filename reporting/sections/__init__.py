"""
Report sections package.

Auto-imports all section modules to trigger registration.
"""

# Import all sections (triggers auto-registration)
from . import filters
from . import ordering
from . import summary
from . import transforms

__all__ = [
    'filters',
    'ordering',
    'summary',
    'transforms',
]

"""Item category modules.

Each category is a separate subpackage that registers itself with the
CategoryRegistry. Import this module to auto-register all categories.
"""

# Import all category modules to trigger registration
from . import weapon
from . import armor
from . import material

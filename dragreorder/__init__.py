"""dragreorder - vertical drag & drop reordering for PyQt5 containers.

Author: Michael Economou
Date: 2026-10-02
"""

from dragreorder.config import APP_VERSION

__version__ = APP_VERSION

"""CLI package.

The ``cli`` sub-package contains the Click application. Commands import
library modules lazily so that ``--help`` stays fast.
"""
from __future__ import annotations

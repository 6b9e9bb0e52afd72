"""CLI package.

The ``cli`` sub-package contains the Click application. It should import
only from the public API of the parser and commands packages.
"""
from __future__ import annotations

"""
Lunatic Functional Helper Package

Small, stateless helpers for plugin configuration code.

ARCHITECTURAL GUARANTEE:
------------------------
Every helper in this package:
    - Holds no state between calls
    - Never mutates its inputs (except `sequences.clear`, by name)
    - Returns freshly built values

The core is the structural transformer (`lunatic.transform`), which maps
and filters keyed containers while preserving their concrete kind and key
order. Everything else is a flat set of independent helpers.
"""

__version__ = "0.1.0"

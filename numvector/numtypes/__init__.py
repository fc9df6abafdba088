"""
Lightweight initializer to avoid import-time cycles.
Import submodules directly (e.g., `from numvector.numtypes.RuntimeTypes import Q`).
"""

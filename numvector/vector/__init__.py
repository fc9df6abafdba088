"""
Import submodules directly (e.g., `from numvector.vector.Vector import Vector`),
or use the re-exports of the top-level `numvector` package.
"""

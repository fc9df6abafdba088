import os

# Element type used when it can not be inferred (e.g. an empty element list)
DEFAULT_ELEMENT_TYPE = float

LOG_LEVEL = os.environ.get("NUMVECTOR_LOG_LEVEL", "WARNING").strip().upper()

# Format of fixed-point constants built from floats
Q_DEFAULT_INT_BITS = 16
Q_DEFAULT_FRAC_BITS = 16

# Per-query budget for symbolic (z3) element comparisons
SMT_TIMEOUT_MS = 10000

import logging

import z3

from numvector.config import SMT_TIMEOUT_MS

logger = logging.getLogger(__name__)


def _unroller(query1, query2, claims):
    if isinstance(query1, tuple) and isinstance(query2, tuple):
        for q1, q2 in zip(query1, query2):
            _unroller(q1, q2, claims)
    elif isinstance(query1, list) and isinstance(query2, list):
        for q1, q2 in zip(query1, query2):
            _unroller(q1, q2, claims)
    else:
        claims.append(query1 == query2)
    return claims


def prove(claim, solver=None) -> bool:
    """True iff `claim` holds for every assignment of its free variables."""
    if isinstance(claim, bool):
        return claim
    s = z3.Solver() if solver is None else solver
    s.set("timeout", SMT_TIMEOUT_MS)

    s.push()
    s.add(z3.Not(claim))
    res = s.check()
    if res == z3.unsat:
        proved = True
    elif res == z3.unknown:
        logger.debug("Could not decide %s: %s", claim, s.reason_unknown())
        proved = False
    else:
        logger.debug("Counterexample for %s: %s", claim, s.model())
        proved = False
    s.pop()
    return proved


def prove_equal(query1, query2, solver=None) -> bool:
    """Proves pairwise equality of two (possibly nested) expression tuples/lists."""
    claims = _unroller(query1, query2, [])
    return prove(z3.And(*claims), solver)

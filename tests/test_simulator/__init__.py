"""
Simulator Tests

Cabin state, request ledger, mover, load sensor, request intake and
infrastructure.
"""

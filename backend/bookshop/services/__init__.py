"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services load entities, call core, then persist inside one unit of work
    - Configuration values arrive through constructors, never read from globals

Design Decisions:
    - One service per concern (catalog read/write, ledger, lifecycle, cart,
      reviews, order queries) for locality
"""

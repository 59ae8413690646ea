"""Services Layer — imperative shell around the pure core (filesystem IO).

Invariants:
    - Services raise TosApiError subclasses; they never build HTTP responses
"""

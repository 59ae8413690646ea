"""ToS API Package — Terms-of-Service document service.

Invariants:
    - Package root contains no executable code besides the version constant

Design Decisions:
    - Version lives here so the health probe and FastAPI metadata share it
"""

__version__ = "1.0.0"

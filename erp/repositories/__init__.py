"""
Persistence adapters.

Backing stores (memory, JSON file, SQL) hold raw strings under keys; the
record store turns one key into a typed collection. Services should depend on
record stores rather than touching a backing store directly.
"""

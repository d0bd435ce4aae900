"""Shared utilities: small generic helpers with no domain knowledge.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

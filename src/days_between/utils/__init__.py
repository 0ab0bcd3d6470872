"""Shared utilities — logging setup and other cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond log output.
* Importable by any layer.
"""

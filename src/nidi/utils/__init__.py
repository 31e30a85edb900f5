"""Shared utilities: cross-cutting concerns such as logging setup.

Rules
-----
* No business logic.
* Importable by any layer.
"""

from nidi.utils.log import configure_logging

__all__: list[str] = ["configure_logging"]

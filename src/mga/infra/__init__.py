"""Infrastructure layer: interaction with the operating system.

Rules
-----
* No imports from ``cli``.
* OS and encoding failures are re-raised as
  :class:`~mga.exceptions.MgaError` subclasses.
"""

from mga.infra.logger import create_logger
from mga.infra.output import encode_result, write_output
from mga.infra.signals import cancel_on_signals

__all__: list[str] = [
    "cancel_on_signals",
    "create_logger",
    "encode_result",
    "write_output",
]

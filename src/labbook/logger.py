# labbook/logger.py
"""Package logger.

Exposes:
  LOGGER      — the ``labbook`` logger, stderr handler attached once
  set_verbose — switch the stderr handler between INFO and DEBUG
"""

import logging
import sys

LOGGER = logging.getLogger("labbook")
LOGGER.setLevel(logging.DEBUG)

_handler = logging.StreamHandler(sys.stderr)
_handler.setLevel(logging.WARNING)
_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s [%(process)d] %(levelname)-5s %(message)s"))
LOGGER.addHandler(_handler)


def set_verbose(verbose: bool) -> None:
    """Show discovery and request chatter on stderr when verbose."""
    _handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

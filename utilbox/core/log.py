from __future__ import annotations

"""Logger factory for the package.

Library modules never configure handlers themselves. The package root logger
gets a ``NullHandler`` so nothing is printed unless the application sets up
logging.
"""

import logging

ROOT_LOGGER_NAME = "utilbox"

_root = logging.getLogger(ROOT_LOGGER_NAME)
# Attach once, even if this module is reloaded
if not any(isinstance(h, logging.NullHandler) for h in _root.handlers):
    _root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``utilbox`` root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

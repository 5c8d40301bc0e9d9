from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "cfgdiff-"


@contextmanager
def placeholder_if_missing(path: Union[str, Path]) -> Iterator[Path]:
    """Yield path, or an empty temp file standing in for it when it does not exist.

    The temp file is removed on exit, including when the body raises.
    """
    path = Path(path)
    if path.exists():
        yield path
        return

    logger.debug("file %s does not exist to diff against, using empty tempfile", path)
    fd, name = tempfile.mkstemp(prefix=PLACEHOLDER_PREFIX)
    os.close(fd)
    try:
        yield Path(name)
    finally:
        Path(name).unlink(missing_ok=True)

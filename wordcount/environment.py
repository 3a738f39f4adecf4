"""Process-wide facts used by help text and tests, kept out of the counting code."""

import os
import platform
import sys
from typing import Optional


def program_name(argv0: Optional[str] = None) -> str:
    name = os.path.basename(argv0 if argv0 is not None else sys.argv[0])
    if not name or name in ("__main__.py", "-c"):
        return "wc"
    return name


def os_name() -> str:
    return platform.system().lower()

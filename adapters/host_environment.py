"""Host environment adapter implementing HostEnvironmentPort.

Describes the interpreter and machine the benchmark run was launched from,
using only the ``platform``, ``os`` and ``sys`` modules.
"""

from __future__ import annotations

import os
import platform
import sys


class PlatformHostEnvironment:
    """Concrete HostEnvironmentPort backed by the running interpreter.

    Values are captured once at construction so a summary keeps a stable
    description even if it is rendered later.
    """

    def __init__(self) -> None:
        self.python_implementation = platform.python_implementation()
        self.python_version = platform.python_version()
        self.os_name = platform.system() or sys.platform
        self.os_release = platform.release()
        self.architecture = platform.machine() or "unknown"
        self.processor_count = os.cpu_count() or 1

    def get_runtime_info(self) -> str:
        """Return e.g. ``CPython 3.12.1, Linux 6.8.0 x86_64, 8 logical cores``."""
        os_text = f"{self.os_name} {self.os_release}".strip()
        return (
            f"{self.python_implementation} {self.python_version}, "
            f"{os_text} {self.architecture}, {self.processor_count} logical cores"
        )

    def as_dict(self) -> dict[str, str]:
        """Key-value view used for console display."""
        return {
            "Python": f"{self.python_implementation} {self.python_version}",
            "OS": f"{self.os_name} {self.os_release}".strip(),
            "Architecture": self.architecture,
            "Logical cores": str(self.processor_count),
        }

from prlens.core.ports.clock import Clock
from prlens.core.ports.logger import Logger
from prlens.core.ports.pr_source import PRSource

__all__ = [
    "Logger",
    "PRSource",
    "Clock",
]

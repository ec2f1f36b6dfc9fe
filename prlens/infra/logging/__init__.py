from prlens.infra.logging.console import ConsoleLogger
from prlens.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]

from .router import ConsoleDispatcher, main, run

__all__ = ["ConsoleDispatcher", "main", "run"]

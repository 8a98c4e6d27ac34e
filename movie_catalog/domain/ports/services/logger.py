from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for application services; messages are pre-formatted strings"""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None: ...

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None: ...

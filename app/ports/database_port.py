from abc import ABC, abstractmethod

from app.ports.job_port import JobPort


class DatabasePort(JobPort, ABC):
    """
    Aggregate port for CRUD operations against the data store.
    Inherits from domain-specific ports to strictly follow ISP.
    """

    @abstractmethod
    async def close(self) -> None:
        """Release any pooled connections."""
        ...

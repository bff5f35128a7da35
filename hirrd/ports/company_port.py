from abc import ABC, abstractmethod
from typing import Any


class CompanyPort(ABC):
    @abstractmethod
    async def list_companies(self) -> list[dict[str, Any]]:
        """List every company, used to populate the company filter."""
        ...

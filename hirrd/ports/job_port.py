from abc import ABC, abstractmethod
from typing import Any

from hirrd.domain.models import FilterState


class JobPort(ABC):
    @abstractmethod
    async def list_jobs(self, filters: FilterState) -> list[dict[str, Any]]:
        """
        List jobs matching the filters, with company and saved-job joins.
        Empty filter fields are not applied.
        """
        ...

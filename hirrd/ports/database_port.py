from abc import ABC

from hirrd.ports.company_port import CompanyPort
from hirrd.ports.job_port import JobPort
from hirrd.ports.user_port import UserPort


class DatabasePort(UserPort, JobPort, CompanyPort, ABC):
    """
    Aggregate port for read operations against the data store.
    Inherits from domain-specific ports to strictly follow ISP.
    """

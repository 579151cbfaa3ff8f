"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from .domain import CompanyMatch


class RecordSource(ABC):
    """Port for loading the data records of a CNAB file"""

    @abstractmethod
    def load(self, path: str | Path) -> list[str]:
        """Return data records with header and trailer lines removed"""
        pass


class MatchExporter(ABC):
    """Port for persisting company matches"""

    @abstractmethod
    def export(self, matches: Sequence[CompanyMatch]) -> Optional[Path]:
        """Persist matches, return the artifact path (None when nothing was written)"""
        pass

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from ..symbols import DocFile


class BasePublisher(ABC):
    """Renders resolved DocFiles into an output directory."""

    @staticmethod
    @abstractmethod
    def get_id() -> str:
        """Stable identifier used to select this publisher (-t/--template)"""
        pass

    @staticmethod
    @abstractmethod
    def get_name() -> str:
        pass

    @abstractmethod
    def publish(self, files: List[DocFile], directory: Path) -> List[Path]:
        """
        Write output for the given files.

        Returns:
            Paths of the files written
        """
        pass

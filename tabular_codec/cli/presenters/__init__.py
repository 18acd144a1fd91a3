"""Presenters for CLI output formatting.

Presenters turn use case responses and derived column metadata into rich
tables and status lines.
"""

from .folders import FolderPresenter
from .records import RecordsPresenter

__all__ = ["FolderPresenter", "RecordsPresenter"]

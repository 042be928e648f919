"""ClassBank maintenance - structure checks and repairs for the ClassBank workbook.

This package verifies the Google Sheets tabs behind the ClassBank classroom
ledger, reports their sizes, and creates any tabs that are missing.
"""

__version__ = "0.1.0"

from .maintenance.service import ClassBankMaintenance
from .sheets.client import GoogleSheetsClient, SheetError


__all__ = [
    "ClassBankMaintenance",
    "GoogleSheetsClient",
    "SheetError",
]

import logging
from typing import Dict, List, Optional, Set

import pytest

from classbank.sheets.client import SheetError
from classbank.sheets.models import EXPECTED_SHEETS


class FakeSheetsClient:
    """In-memory stand-in for GoogleSheetsClient"""

    def __init__(self, sheets: Optional[Dict[str, List[List[str]]]] = None):
        self.sheets = {name: [list(row) for row in rows] for name, rows in (sheets or {}).items()}
        self.sheet_ids = {name: index for index, name in enumerate(self.sheets, start=100)}
        self.formats: Dict[int, tuple] = {}
        self.mutations: List[tuple] = []
        self.fail_on: Set[str] = set()

    def get_sheet_ids(self) -> Dict[str, int]:
        return dict(self.sheet_ids)

    def get_values(self, sheet_name: str) -> List[List[str]]:
        return [list(row) for row in self.sheets[sheet_name]]

    def add_sheet_with_header(self, sheet_name: str, sheet_id: int, headers: List[str], hex_color: str) -> None:
        if sheet_name in self.fail_on:
            raise SheetError(f"Failed to add sheet {sheet_name}: quota exceeded")
        if sheet_name in self.sheets or sheet_id in self.sheet_ids.values():
            raise SheetError(f"Failed to add sheet {sheet_name}: already exists")
        self.sheets[sheet_name] = [list(headers)]
        self.sheet_ids[sheet_name] = sheet_id
        self.formats[sheet_id] = (len(headers), hex_color)
        self.mutations.append(("add_sheet_with_header", sheet_name))


@pytest.fixture
def well_formed_sheets() -> Dict[str, List[List[str]]]:
    """Every expected sheet with its header row and no data"""
    return {schema.name: [list(schema.headers)] for schema in EXPECTED_SHEETS}


@pytest.fixture
def fake_client(well_formed_sheets) -> FakeSheetsClient:
    return FakeSheetsClient(well_formed_sheets)


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Point setup_logging at a temp dir and drop its handlers afterwards"""
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    root_logger = logging.getLogger()
    level, handlers = root_logger.level, list(root_logger.handlers)
    yield tmp_path
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)

import logging
from functools import lru_cache
from typing import Annotated, Callable

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from classbank.main import build_maintenance, load_config
from classbank.maintenance.service import ClassBankMaintenance
from classbank.sheets.client import SheetError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


class Report(BaseModel):
    report: str


@lru_cache
def get_maintenance() -> ClassBankMaintenance:
    return build_maintenance(load_config(require_telegram=False))


Maintenance = Annotated[ClassBankMaintenance, Depends(get_maintenance)]


def _run(operation: Callable[[], str]) -> Report:
    try:
        return Report(report=operation())
    except SheetError as e:
        logger.exception("Maintenance operation failed")
        raise HTTPException(status_code=502, detail=str(e)) from e


@router.get("/verify")
def verify_structure(maintenance: Maintenance) -> Report:
    """Check every expected sheet and its header row."""
    return _run(maintenance.verify_structure)


@router.get("/report")
def report_data(maintenance: Maintenance) -> Report:
    """Return the number of data rows per record sheet."""
    return _run(maintenance.report_data)


@router.get("/mixed")
def check_mixed_data(maintenance: Maintenance) -> Report:
    """Flag Transactions rows with an unexpected Type."""
    return _run(maintenance.check_mixed_data)


@router.post("/provision")
def create_missing_sheets(maintenance: Maintenance) -> Report:
    """Create any missing sheets with their header rows."""
    return _run(maintenance.create_missing_sheets)

import logging
from typing import Sequence

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import (
    CATEGORY_COLUMN,
    DEPOSIT,
    TRANSACTIONS_SHEET,
    WITHDRAW,
    MixedDataScan,
    get_schema,
)

logger = logging.getLogger(__name__)

# Number of distinct unrecognized values quoted in the report
MAX_LISTED_VALUES = 5


def classify_rows(rows: Sequence[Sequence[str]], category_index: int) -> MixedDataScan:
    """Tally data rows by category; rows without a category are skipped"""
    scan = MixedDataScan()
    for row in rows:
        category = str(row[category_index]) if len(row) > category_index else ""
        if not category:
            continue
        if category == DEPOSIT:
            scan.deposits += 1
        elif category == WITHDRAW:
            scan.withdrawals += 1
        else:
            scan.other += 1
            if category not in scan.other_values:
                scan.other_values.append(category)
    return scan


def scan_mixed_data(client: GoogleSheetsClient) -> MixedDataScan:
    """Look for Transactions rows that probably belong to another sheet"""
    if TRANSACTIONS_SHEET not in client.get_sheet_ids():
        logger.warning(f"Sheet {TRANSACTIONS_SHEET} is missing, nothing to scan")
        return MixedDataScan(sheet_missing=True)

    category_index = get_schema(TRANSACTIONS_SHEET).headers.index(CATEGORY_COLUMN)
    values = client.get_values(TRANSACTIONS_SHEET)
    return classify_rows(values[1:], category_index)


def format_scan_report(scan: MixedDataScan) -> str:
    if scan.sheet_missing:
        return f"❌ {TRANSACTIONS_SHEET} sheet not found. Nothing to scan."

    lines = [
        f"🔎 {TRANSACTIONS_SHEET} data check",
        "",
        f"{DEPOSIT}: {scan.deposits}",
        f"{WITHDRAW}: {scan.withdrawals}",
        f"Other: {scan.other}",
    ]
    if scan.has_foreign_rows:
        listed = ", ".join(scan.other_values[:MAX_LISTED_VALUES])
        if len(scan.other_values) > MAX_LISTED_VALUES:
            listed += ", ..."
        lines.append("")
        lines.append(
            f"⚠️ {scan.other} rows have an unexpected {CATEGORY_COLUMN} ({listed}). "
            "They were probably written from another sheet."
        )
    else:
        lines.append("")
        lines.append("✅ No mixed data found.")
    return "\n".join(lines)

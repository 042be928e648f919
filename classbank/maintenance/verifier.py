import logging
from typing import List, Sequence

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import EXPECTED_SHEETS, SheetCheck, SheetSchema, SheetStatus

logger = logging.getLogger(__name__)


def check_sheet(schema: SheetSchema, values: Sequence[Sequence[str]]) -> SheetCheck:
    """Compare the first row of a present tab against its expected headers.

    Only the expected-length prefix of the found header row is compared, so
    extra trailing columns do not count as a mismatch.
    """
    expected = list(schema.headers)
    if not values:
        return SheetCheck(name=schema.name, status=SheetStatus.EMPTY, expected=expected)

    found = [str(cell) for cell in values[0]]
    prefix = found[: len(expected)]
    if prefix != expected:
        return SheetCheck(
            name=schema.name,
            status=SheetStatus.MISMATCH,
            expected=expected,
            found=found,
        )

    return SheetCheck(
        name=schema.name,
        status=SheetStatus.OK,
        expected=expected,
        found=found,
        data_rows=len(values) - 1,
    )


def verify_structure(client: GoogleSheetsClient) -> List[SheetCheck]:
    """Check every expected tab; absent tabs are reported, never raised"""
    existing = client.get_sheet_ids()
    checks = []
    for schema in EXPECTED_SHEETS:
        if schema.name not in existing:
            logger.warning(f"Sheet {schema.name} is missing")
            checks.append(
                SheetCheck(name=schema.name, status=SheetStatus.MISSING, expected=list(schema.headers))
            )
            continue
        checks.append(check_sheet(schema, client.get_values(schema.name)))
    return checks


def format_structure_report(checks: Sequence[SheetCheck]) -> str:
    lines = ["📋 ClassBank structure check", ""]
    for check in checks:
        if check.status is SheetStatus.MISSING:
            lines.append(f"❌ {check.name}: sheet missing")
        elif check.status is SheetStatus.EMPTY:
            lines.append(f"⚠️ {check.name}: sheet is empty")
        elif check.status is SheetStatus.MISMATCH:
            lines.append(f"⚠️ {check.name}: header mismatch")
            lines.append(f"   expected: {', '.join(check.expected)}")
            lines.append(f"   found:    {', '.join(check.found)}")
        else:
            lines.append(f"✅ {check.name}: headers OK ({check.data_rows} data rows)")

    problems = sum(1 for check in checks if check.status is not SheetStatus.OK)
    lines.append("")
    if problems:
        lines.append(f"{problems} of {len(checks)} sheets need attention.")
    else:
        lines.append("All sheets look good.")
    return "\n".join(lines)

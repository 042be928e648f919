import logging
from typing import List, Sequence

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import EXPECTED_SHEETS

logger = logging.getLogger(__name__)


def create_missing_sheets(client: GoogleSheetsClient) -> List[str]:
    """Create every absent tab with a styled header row.

    Tabs that already exist are left untouched, so a second run is a no-op.
    Each tab is added together with its header in one request, so a failure
    never leaves a bare tab behind for the next run to skip.
    """
    existing = client.get_sheet_ids()
    next_id = max(existing.values(), default=0) + 1
    created = []
    for schema in EXPECTED_SHEETS:
        if schema.name in existing:
            continue

        logger.info(f"Creating sheet {schema.name} (sheetId {next_id})")
        client.add_sheet_with_header(schema.name, next_id, list(schema.headers), schema.header_color)
        created.append(schema.name)
        next_id += 1

    return created


def format_provision_report(created: Sequence[str]) -> str:
    if not created:
        return "✅ All sheets already exist. Nothing was created."
    lines = [f"🆕 Created {len(created)} sheet(s):", ""]
    lines.extend(f"- {name}" for name in created)
    return "\n".join(lines)

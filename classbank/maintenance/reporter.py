import logging
from typing import Dict

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import RECORD_SHEETS, data_row_count

logger = logging.getLogger(__name__)


def count_data_rows(client: GoogleSheetsClient) -> Dict[str, int]:
    """Data rows per record-bearing sheet; absent sheets count as zero"""
    existing = client.get_sheet_ids()
    counts = {}
    for schema in RECORD_SHEETS:
        if schema.name not in existing:
            counts[schema.name] = 0
            continue
        counts[schema.name] = data_row_count(len(client.get_values(schema.name)))
    return counts


def format_data_report(counts: Dict[str, int]) -> str:
    lines = ["📊 ClassBank data summary", ""]
    lines.extend(f"{name}: {count} rows" for name, count in counts.items())
    lines.append("")
    lines.append(f"Total: {sum(counts.values())} rows")
    return "\n".join(lines)

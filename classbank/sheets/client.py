import logging
from typing import Dict, List

from google.oauth2 import service_account
from googleapiclient.discovery import build

from .models import hex_to_rgb

logger = logging.getLogger(__name__)

HEADER_FIELDS = "userEnteredValue,userEnteredFormat(backgroundColor,textFormat.bold)"


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


class GoogleSheetsClient:
    """Handles all Google Sheets operations against the ClassBank workbook"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_path: str,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_path = credentials_path
        self.service = self._build_sheets_service()

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = service_account.Credentials.from_service_account_file(
                self.credentials_path, scopes=self.SCOPES
            )
            return build("sheets", "v4", credentials=creds, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    @staticmethod
    def _quote(sheet_name: str) -> str:
        return "'{}'".format(sheet_name.replace("'", "''"))

    def get_sheet_ids(self) -> Dict[str, int]:
        """Map every tab title in the workbook to its sheetId"""
        try:
            result = (
                self.service.spreadsheets()
                .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error reading workbook metadata: {e}")
            raise SheetError(f"Failed to open spreadsheet {self.spreadsheet_id}: {str(e)}")

        return {
            sheet["properties"]["title"]: sheet["properties"]["sheetId"]
            for sheet in result.get("sheets", [])
        }

    def get_values(self, sheet_name: str) -> List[List[str]]:
        """Get the used range of a tab; trailing empty rows are not returned"""
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=self._quote(sheet_name))
                .execute()
            )
            return result.get("values", [])
        except Exception as e:
            logger.error(f"Error reading {sheet_name}: {e}")
            raise SheetError(f"Failed to read sheet {sheet_name}: {str(e)}")

    @staticmethod
    def _header_cell(value: str, hex_color: str) -> dict:
        return {
            "userEnteredValue": {"stringValue": value},
            "userEnteredFormat": {
                "backgroundColor": hex_to_rgb(hex_color),
                "textFormat": {"bold": True},
            },
        }

    def add_sheet_with_header(
        self, sheet_name: str, sheet_id: int, headers: List[str], hex_color: str
    ) -> None:
        """Add a tab and append its bold, colored header row.

        Both requests go out in a single batchUpdate, which the API applies
        atomically: either the tab appears with its styled header or not at all.
        """
        requests = [
            {"addSheet": {"properties": {"sheetId": sheet_id, "title": sheet_name}}},
            {
                "appendCells": {
                    "sheetId": sheet_id,
                    "rows": [{"values": [self._header_cell(h, hex_color) for h in headers]}],
                    "fields": HEADER_FIELDS,
                }
            },
        ]
        try:
            self.service.spreadsheets().batchUpdate(
                spreadsheetId=self.spreadsheet_id, body={"requests": requests}
            ).execute()
        except Exception as e:
            logger.error(f"Error adding sheet {sheet_name}: {e}")
            raise SheetError(f"Failed to add sheet {sheet_name}: {str(e)}")

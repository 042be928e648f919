from unittest.mock import MagicMock, patch

import pytest
from google.oauth2 import service_account

from classbank.sheets.client import GoogleSheetsClient, SheetError


@pytest.fixture
def client():
    with patch.object(GoogleSheetsClient, "_build_sheets_service", return_value=MagicMock()):
        yield GoogleSheetsClient(spreadsheet_id="sheet-123", credentials_path="creds.json")


def test_build_failure_raises_sheet_error():
    with patch.object(
        service_account.Credentials,
        "from_service_account_file",
        side_effect=FileNotFoundError("creds.json"),
    ):
        with pytest.raises(SheetError, match="Could not initialize sheets service"):
            GoogleSheetsClient(spreadsheet_id="sheet-123", credentials_path="creds.json")


def test_get_sheet_ids(client):
    client.service.spreadsheets().get().execute.return_value = {
        "sheets": [
            {"properties": {"title": "Students", "sheetId": 0}},
            {"properties": {"title": "Settings", "sheetId": 42}},
        ]
    }
    assert client.get_sheet_ids() == {"Students": 0, "Settings": 42}


def test_get_sheet_ids_wraps_errors(client):
    client.service.spreadsheets().get().execute.side_effect = RuntimeError("403")
    with pytest.raises(SheetError, match="Failed to open spreadsheet sheet-123"):
        client.get_sheet_ids()


def test_get_values_quotes_sheet_name(client):
    values_api = client.service.spreadsheets().values()
    values_api.get().execute.return_value = {"values": [["Key", "Value", "Updated At"]]}

    assert client.get_values("Settings") == [["Key", "Value", "Updated At"]]
    values_api.get.assert_called_with(spreadsheetId="sheet-123", range="'Settings'")


def test_get_values_of_empty_sheet(client):
    client.service.spreadsheets().values().get().execute.return_value = {"range": "'Health'!A1:Z1000"}
    assert client.get_values("Health") == []


def test_add_sheet_with_header_is_one_batch(client):
    spreadsheets = client.service.spreadsheets()

    client.add_sheet_with_header("Settings", 7, ["Key", "Value", "Updated At"], "#FF0000")

    spreadsheets.batchUpdate.assert_called_once()
    kwargs = spreadsheets.batchUpdate.call_args.kwargs
    assert kwargs["spreadsheetId"] == "sheet-123"
    add_sheet, append_cells = kwargs["body"]["requests"]
    assert add_sheet == {"addSheet": {"properties": {"sheetId": 7, "title": "Settings"}}}

    append_cells = append_cells["appendCells"]
    assert append_cells["sheetId"] == 7
    assert append_cells["fields"] == "userEnteredValue,userEnteredFormat(backgroundColor,textFormat.bold)"
    cells = append_cells["rows"][0]["values"]
    assert [cell["userEnteredValue"]["stringValue"] for cell in cells] == ["Key", "Value", "Updated At"]
    for cell in cells:
        assert cell["userEnteredFormat"] == {
            "backgroundColor": {"red": 1.0, "green": 0.0, "blue": 0.0},
            "textFormat": {"bold": True},
        }


def test_add_sheet_with_header_wraps_errors(client):
    client.service.spreadsheets().batchUpdate().execute.side_effect = RuntimeError("quota")
    with pytest.raises(SheetError, match="Failed to add sheet Settings"):
        client.add_sheet_with_header("Settings", 7, ["Key"], "#FF0000")


def test_failed_reads_are_not_retried(client):
    execute = client.service.spreadsheets().values().get().execute
    execute.side_effect = RuntimeError("503 backend error")

    with pytest.raises(SheetError, match="Failed to read sheet Health"):
        client.get_values("Health")
    assert execute.call_count == 1

import logging

from ..sheets.client import GoogleSheetsClient
from . import provisioner, reporter, scanner, verifier

logger = logging.getLogger(__name__)


class ClassBankMaintenance:
    """Maintenance operations for the ClassBank workbook.

    Every operation is a single synchronous pass over the workbook. The
    report is written to the log and returned so the calling surface can
    show it to the user.
    """

    def __init__(self, sheets_client: GoogleSheetsClient):
        self.sheets_client = sheets_client

    def verify_structure(self) -> str:
        """Check that every expected sheet exists with the right headers"""
        checks = verifier.verify_structure(self.sheets_client)
        return self._publish(verifier.format_structure_report(checks))

    def check_mixed_data(self) -> str:
        """Count Transactions rows by Type and flag foreign categories"""
        scan = scanner.scan_mixed_data(self.sheets_client)
        return self._publish(scanner.format_scan_report(scan))

    def report_data(self) -> str:
        """Summarize the number of data rows per record sheet"""
        counts = reporter.count_data_rows(self.sheets_client)
        return self._publish(reporter.format_data_report(counts))

    def create_missing_sheets(self) -> str:
        """Create absent sheets with their header rows"""
        created = provisioner.create_missing_sheets(self.sheets_client)
        return self._publish(provisioner.format_provision_report(created))

    @staticmethod
    def _publish(report: str) -> str:
        logger.info(report)
        return report

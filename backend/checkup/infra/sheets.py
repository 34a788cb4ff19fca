# checkup/infra/sheets.py
"""
Lecture des plages du tableur Checkup via l'API Google Sheets v4.

Compte de service en lecture seule. Les trois plages sont lues en
parallèle ; le client googleapiclient (httplib2) n'étant pas thread-safe,
chaque lecture construit son propre service dans son thread. Les credentials
sont construits une fois, avant le départ des threads.
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from google.oauth2 import service_account
from googleapiclient.discovery import build

from checkup.core.config import Settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

Rows = List[List[str]]


class SheetsFetchError(RuntimeError):
    """Échec de lecture d'une plage : fait échouer toute la sync."""


class SheetsClient:

    def __init__(self, spreadsheet_id: str, client_email: str, private_key: str):
        self.spreadsheet_id = spreadsheet_id
        self._client_email = client_email
        self._private_key = private_key
        self._credentials: Optional[service_account.Credentials] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsClient":
        return cls(
            spreadsheet_id=settings.GOOGLE_SHEETS_SPREADSHEET_ID,
            client_email=settings.GOOGLE_SERVICE_ACCOUNT_EMAIL,
            private_key=settings.google_private_key,
        )

    def _get_credentials(self) -> service_account.Credentials:
        if self._credentials is None:
            self._credentials = service_account.Credentials.from_service_account_info(
                {
                    "client_email": self._client_email,
                    "private_key": self._private_key,
                    "token_uri": TOKEN_URI,
                },
                scopes=SCOPES,
            )
        return self._credentials

    def _get_values(self, range_name: str, credentials: service_account.Credentials) -> Rows:
        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        response = (
            service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=range_name)
            .execute()
        )
        return response.get("values", [])

    async def fetch_ranges(self, ranges: Sequence[str]) -> List[Rows]:
        """
        Lit toutes les plages en parallèle, dans l'ordre demandé.
        Une seule plage en échec → SheetsFetchError, aucun résultat partiel.
        """
        if not self.spreadsheet_id:
            raise SheetsFetchError("GOOGLE_SHEETS_SPREADSHEET_ID non configuré")

        try:
            credentials = self._get_credentials()
            results = await asyncio.gather(
                *(asyncio.to_thread(self._get_values, r, credentials) for r in ranges)
            )
        except Exception as e:
            logger.error("Lecture Google Sheets échouée", exc_info=True)
            raise SheetsFetchError(f"Failed to fetch data from Google Sheets: {e}") from e

        for range_name, rows in zip(ranges, results):
            logger.info("Plage lue", extra={"range": range_name, "rows": len(rows)})
        return list(results)

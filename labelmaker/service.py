"""Print submission: validate, post to the print service, record history."""

import asyncio
import logging
import threading
from collections.abc import Callable

import httpx

from labelmaker import messages
from labelmaker.connection import ConnectionSettings, SettingsStore
from labelmaker.history import HistoryStore
from labelmaker.schemas import PrintItem, PrintRequest, PrintResult

logger = logging.getLogger(__name__)


class PrintService:
    """Service that sends labels to the remote printer.

    Every submission produces exactly one user-facing message. Network
    failures never propagate; storage failures do.

    Attributes:
        settings_store: Source of the endpoint and auth token.
        history: History updated after each successful print.
    """

    def __init__(
        self,
        settings_store: SettingsStore | None = None,
        history: HistoryStore | None = None,
    ):
        """Initialize the print service.

        Args:
            settings_store: Connection settings store (default: configured preferences).
            history: History store (default: configured preferences).
        """
        self.settings_store = settings_store if settings_store is not None else SettingsStore()
        self.history = history if history is not None else HistoryStore()

    async def send(self, request: PrintRequest, settings: ConnectionSettings) -> PrintResult:
        """Post a print request to the configured endpoint.

        Args:
            request: Labels to print.
            settings: Endpoint and auth token.

        Returns:
            PrintResult: Success with status code, or failure with a reason.
        """
        headers = {
            "Authorization": settings.auth_token,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    settings.endpoint,
                    json=request.model_dump(),
                    headers=headers,
                )
        except Exception as e:
            logger.error(f"Print request to {settings.endpoint!r} failed: {e!r}")
            return PrintResult(success=False, reason=str(e) or e.__class__.__name__)

        if response.status_code == httpx.codes.OK:
            return PrintResult(
                success=True,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        logger.warning(f"Print service rejected request: {response.status_code}")
        return PrintResult(
            success=False,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    async def submit(self, text: str | None, qty: int = 1) -> str:
        """Print one label and record it in the history on success.

        Args:
            text: Label text; None or empty is rejected without any I/O.
            qty: Number of copies (1-3).

        Returns:
            str: Message to show to the user.
        """
        if not text:
            return messages.EMPTY_ERROR

        settings = self.settings_store.load()
        request = PrintRequest(items=[PrintItem(body=text, qty=qty)])

        logger.info(f"Printing label ({len(text)} chars, {qty} copies)")
        result = await self.send(request, settings)

        if result.success:
            self.history.save(text)
            logger.info("Label printed successfully")
            return messages.PRINT_SUCCESS

        return f"{messages.PRINT_ERROR}: {result.reason}"

    def submit_in_background(
        self,
        text: str | None,
        qty: int,
        callback: Callable[[str], None],
    ) -> threading.Thread:
        """Run submit() in a background thread.

        Args:
            text: Label text.
            qty: Number of copies.
            callback: Called once with the outcome message.

        Returns:
            threading.Thread: The started thread.
        """

        def _run():
            try:
                message = asyncio.run(self.submit(text, qty))
            except Exception as e:
                logger.exception(f"Print submission error: {e}")
                message = f"{messages.PRINT_ERROR}: {e}"
            callback(message)

        thread = threading.Thread(target=_run, daemon=True, name="labelmaker-print")
        thread.start()
        return thread

    def clear_history(self) -> str:
        """Clear the print history.

        Returns:
            str: Message to show to the user.
        """
        self.history.delete_all()
        return messages.HISTORY_CLEARED


def get_print_service(
    settings_store: SettingsStore | None = None,
    history: HistoryStore | None = None,
) -> PrintService:
    """Factory function for PrintService.

    Args:
        settings_store: Optional settings store.
        history: Optional history store.

    Returns:
        PrintService: Service instance.
    """
    return PrintService(settings_store, history)

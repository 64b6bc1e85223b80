"""Interactive menu loop over a :class:`CatalogService`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict

from rich.console import Console

from .application.services.catalog_service import CatalogService
from .errors import PhotoCatalogError
from .errors.handler import ErrorHandler, ErrorSeverity

logger = logging.getLogger(__name__)

MENU_LINES = (
    "",
    "=== Photo Management Menu ===",
    "1. Find Photo",
    "2. Update Photo Details",
    "3. Album Photo List",
    "4. Tag Photo",
    "5. Exit",
)
SELECTION_PROMPT = "Your selection> "
INVALID_SELECTION = "Invalid selection. Please enter 1–5."
GOODBYE = "Exiting... Goodbye!"


class ShellSignal(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


class CatalogShell:
    """Numeric menu driving the catalog service.

    ``reader`` is called with a prompt and returns one line of input; it
    raises :class:`EOFError` once input is exhausted, which ends the loop the
    same way choosing *Exit* does.
    """

    def __init__(
        self,
        service: CatalogService,
        reader: Callable[[str], str] = input,
        console: Console | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self._service = service
        self._read = reader
        self._console = console or Console()
        self._errors = error_handler or ErrorHandler(logger, self._print_error)
        self._actions: Dict[str, Callable[[], ShellSignal]] = {
            "1": self._find_photo,
            "2": self._update_photo,
            "3": self._album_photo_list,
            "4": self._tag_photo,
            "5": self._exit,
        }

    def run(self) -> None:
        signal = ShellSignal.CONTINUE
        while signal is ShellSignal.CONTINUE:
            self.show_menu()
            try:
                choice = self._read(SELECTION_PROMPT)
            except EOFError:
                break
            signal = self.dispatch(choice)

    def show_menu(self) -> None:
        for line in MENU_LINES:
            self.notify(line)

    def dispatch(self, choice: str) -> ShellSignal:
        """Run the action bound to *choice* and report whether to keep going."""

        action = self._actions.get(choice.strip())
        if action is None:
            self.notify(INVALID_SELECTION)
            return ShellSignal.CONTINUE
        try:
            return action()
        except EOFError:
            return ShellSignal.EXIT
        except PhotoCatalogError as exc:
            self._errors.handle(exc, ErrorSeverity.WARNING, context={"choice": choice.strip()})
            return ShellSignal.CONTINUE

    def notify(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def _find_photo(self) -> ShellSignal:
        photo_id = self._read("Enter Photo ID: ")
        photo = self._service.format_photo(photo_id)
        if photo is not None:
            self._console.print_json(data=photo.to_display())
        return ShellSignal.CONTINUE

    def _update_photo(self) -> ShellSignal:
        photo_id = self._read("Enter Photo ID: ")
        # Only prompt for new values when there is a photo to edit.
        if self._service.find_photo(photo_id) is None:
            return ShellSignal.CONTINUE
        title = self._read("Enter New Title: ")
        description = self._read("Enter New description: ")
        self._service.update_photo(photo_id, title, description)
        return ShellSignal.CONTINUE

    def _album_photo_list(self) -> ShellSignal:
        album_name = self._read("Enter Album Name: ").lower()
        photos = self._service.list_photos_in_album(album_name)
        self._console.print_json(data=[photo.to_display() for photo in photos])
        return ShellSignal.CONTINUE

    def _tag_photo(self) -> ShellSignal:
        photo_id = self._read("Enter Photo ID: ")
        if self._service.find_photo(photo_id) is None:
            return ShellSignal.CONTINUE
        tag = self._read("Enter New Tag: ")
        self._service.add_tag(photo_id, tag)
        return ShellSignal.CONTINUE

    def _exit(self) -> ShellSignal:
        self.notify(GOODBYE)
        return ShellSignal.EXIT

    def _print_error(self, message: str, severity: ErrorSeverity) -> None:
        self._console.print(f"Error: {message}", style="red", markup=False, highlight=False)


__all__ = ["CatalogShell", "ShellSignal"]

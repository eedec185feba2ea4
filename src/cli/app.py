"""
Console shell and orchestrator.

PhoneApplication owns the services and routes messages between them:
DialRequested from the contact store goes to the dialer, and the dialer's
CallCompleted goes to the call history store.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path

from cli.config import Settings
from cli.messages import Catalog
from sphone.application import (
    CallCompleted,
    CallHistoryService,
    CallState,
    ContactService,
    DialRequested,
    DialService,
    ExportService,
    PhoneAdded,
)
from sphone.domain import (
    CallRecord,
    Contact,
    ContactType,
    FeatureNotAvailable,
    SphoneError,
    clean_phone,
    is_valid_phone,
)
from sphone.infrastructure import JsonFileRepository

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]
Handler = Callable[[], Awaitable[None] | None]

TYPE_CHOICES = {"1": ContactType.HOME, "2": ContactType.WORK}


class PhoneApplication:
    """Main menu loop plus the contacts sub-menu. Input and output are injectable."""

    def __init__(
        self,
        contacts: ContactService,
        history: CallHistoryService,
        exporter: ExportService,
        catalog: Catalog,
        *,
        export_path: Path | str,
        read_line: ReadLine = input,
        write: Write = print,
        clock: Callable[[], datetime] = datetime.now,
        startup_warnings: list[str] | None = None,
    ) -> None:
        self._contacts = contacts
        self._history = history
        self._exporter = exporter
        self._catalog = catalog
        self._export_path = Path(export_path)
        self._read_line = read_line
        self._write = write
        self._startup_warnings = list(startup_warnings or [])
        self._dialer = DialService(
            contact_lookup=contacts.find_by_number,
            on_state=self._show_call_state,
            clock=clock,
        )
        self._main_handlers: dict[str, Handler] = {
            "dial": self._dial_interactive,
            "view_history": self._view_history,
            "contacts": self._contacts_menu,
        }
        self._contact_handlers: dict[str, Handler] = {
            "add_contact": self._add_contact_interactive,
            "search_contacts": self._search_interactive,
            "export_contacts": self._export_contacts,
            "call_contact": self._call_contact_interactive,
        }

    # --- message routing ---

    def dial(self, number: str, contact_name: str | None = None) -> CallRecord:
        """Place a call and record it. Raises InvalidPhoneNumber without recording anything."""
        completed = self._dialer.dial_number(number, contact_name)
        return self.on_call_completed(completed)

    def on_dial_requested(self, request: DialRequested) -> CallRecord:
        return self.dial(request.number, request.contact_name)

    def on_call_completed(self, event: CallCompleted) -> CallRecord:
        return self._history.handle(event)

    # --- loop ---

    async def run(self) -> None:
        """Run until the user exits or input ends."""
        for warning in self._startup_warnings:
            self._say("warning", warning=warning)
        menu = self._catalog.menu("main")
        while True:
            self._show_welcome()
            try:
                choice = self._ask(self._catalog.text("enter_choice"))
            except EOFError:
                self._say("goodbye")
                return
            action = menu.action_for(choice)
            if action is None:
                self._say("invalid_option", choices=menu.keys_text())
                continue
            if action == "exit":
                self._say("goodbye")
                return
            try:
                await self._run_action(action, self._main_handlers)
            except EOFError:
                self._say("goodbye")
                return

    async def _contacts_menu(self) -> None:
        menu = self._catalog.menu("contacts")
        while True:
            for line in menu.lines():
                self._write(line)
            choice = self._ask(self._catalog.text("enter_choice"))
            action = menu.action_for(choice)
            if action is None:
                self._say("invalid_option", choices=menu.keys_text())
                continue
            if action == "back":
                return
            await self._run_action(action, self._contact_handlers)

    async def _run_action(self, action: str, handlers: dict[str, Handler]) -> None:
        """Run one menu action. Recoverable errors become a one-line message."""
        try:
            handler = handlers.get(action)
            if handler is None:
                raise FeatureNotAvailable(action)
            result = handler()
            if inspect.isawaitable(result):
                await result
        except EOFError:
            raise
        except (SphoneError, ValueError) as e:
            self._say("error", error=e)
        except Exception as e:
            logger.exception("Menu action %s failed", action)
            self._say("unexpected_error", error=e)

    # --- main menu actions ---

    def _dial_interactive(self) -> None:
        self._say("dial_title")
        number = self._ask(self._catalog.text("enter_phone_number"))
        self.dial(number)

    def _view_history(self) -> None:
        self._say("call_history_title")
        if not self._history.get_all():
            self._say("no_dialed_numbers")
            return
        self._write(self._history.display())

    def _show_call_state(
        self, state: CallState, number: str, contact_name: str | None
    ) -> None:
        if state is CallState.DIALING:
            if contact_name:
                self._say("calling_contact", name=contact_name)
            self._say("dialing", number=number)
        elif state is CallState.CONNECTED:
            self._say("call_connected")
        elif state is CallState.ENDED:
            self._say("call_ended")

    # --- contacts sub-menu actions ---

    def _add_contact_interactive(self) -> None:
        self._say("add_contact_title")
        name = self._ask(self._catalog.text("enter_contact_name")).strip()
        if not name:
            self._say("name_cannot_be_empty")
            return

        existing = self._contacts.find_by_name(name)
        if existing is not None:
            self._say("contact_exists", name=existing.name, count=len(existing.phone_numbers))
            if not self._confirm("confirm_add_number"):
                self._say("operation_cancelled")
                return
            self._add_number_to_existing(existing)
            return

        entries: list[tuple[str, ContactType]] = []
        while True:
            number = self._ask(self._catalog.text("enter_phone_number_n", index=len(entries) + 1))
            if not is_valid_phone(number):
                self._say("invalid_phone_number")
                continue
            clean = clean_phone(number)
            if any(existing_number == clean for existing_number, _ in entries):
                self._say("number_already_entered")
                continue
            contact_type = self._ask_type()
            while contact_type is None:
                contact_type = self._ask_type()
            entries.append((clean, contact_type))
            self._say("number_added", number=clean, type=contact_type.value)
            if not self._confirm("confirm_another_number"):
                break

        contact = self._contacts.create_contact(name, entries)
        self._say("contact_created", name=contact.name, count=len(contact.phone_numbers))

    def _add_number_to_existing(self, contact: Contact) -> None:
        number = self._ask(self._catalog.text("enter_phone_number_for_contact"))
        if not is_valid_phone(number):
            self._say("invalid_phone_number")
            return
        if contact.has_phone_number(clean_phone(number)):
            self._say("contact_already_has_number", name=contact.name)
            return
        contact_type = self._ask_type()
        if contact_type is None:
            return
        result = self._contacts.add_phone_number(contact, number, contact_type)
        if isinstance(result, PhoneAdded):
            self._say(
                "number_added_to_contact",
                number=result.entry.number,
                type=result.entry.type.value,
                name=contact.name,
            )
        else:
            self._say("contact_already_has_number", name=contact.name)

    def _search_interactive(self) -> None:
        self._say("search_title")
        self._say("search_by")
        choice = self._ask(self._catalog.text("enter_choice")).strip()
        term = self._ask(self._catalog.text("enter_search_term")).strip()
        if not term:
            self._say("search_term_cannot_be_empty")
            return
        if choice == "1":
            results = self._contacts.search_by_name(term)
        elif choice == "2":
            results = self._contacts.search_by_number(term)
        else:
            self._say("invalid_search_choice")
            return
        if not results:
            self._say("no_contacts_found", term=term)
            return
        self._say("contacts_found", count=len(results))
        for i, contact in enumerate(results, start=1):
            self._say("contact_heading", index=i)
            self._write(str(contact))

    async def _export_contacts(self) -> None:
        contacts = self._contacts.list_contacts()
        if not contacts:
            self._say("no_contacts_available")
            return
        self._say("export_starting")
        try:
            count = await self._exporter.export_contacts(contacts, self._export_path)
        except OSError as e:
            logger.warning("Export to %s failed: %s", self._export_path, e)
            self._say("export_failed", error=e)
            return
        self._say("export_success", count=count, path=self._export_path)

    def _call_contact_interactive(self) -> None:
        self._say("call_contact_title")
        contacts = self._contacts.list_contacts()
        if not contacts:
            self._say("no_contacts_available")
            return
        self._say("available_contacts")
        for i, contact in enumerate(contacts, start=1):
            self._say("contact_choice", index=i, name=contact.name, count=len(contact.phone_numbers))
        index = self._ask_index(self._catalog.text("enter_contact_number_to_call"), len(contacts))
        if index is None:
            self._say("invalid_contact_number")
            return
        contact = contacts[index]

        number_index = 0
        if len(contact.phone_numbers) > 1:
            self._say("multiple_numbers", name=contact.name)
            for i, entry in enumerate(contact.phone_numbers, start=1):
                self._say("number_choice", index=i, number=entry.number, type=entry.type.value)
            number_index = self._ask_index(
                self._catalog.text("select_number_to_call"), len(contact.phone_numbers)
            )
            if number_index is None:
                raise ValueError("Invalid number selection!")
        self.on_dial_requested(self._contacts.request_dial_for(contact, number_index))

    # --- helpers ---

    def _ask(self, prompt: str) -> str:
        return self._read_line(prompt)

    def _say(self, key: str, **values) -> None:
        self._write(self._catalog.text(key, **values))

    def _confirm(self, key: str) -> bool:
        return self._ask(self._catalog.text(key)).strip().lower() == "y"

    def _ask_type(self) -> ContactType | None:
        self._say("select_type")
        contact_type = TYPE_CHOICES.get(self._ask(self._catalog.text("enter_type_choice")).strip())
        if contact_type is None:
            self._say("invalid_type_choice")
        return contact_type

    def _ask_index(self, prompt: str, count: int) -> int | None:
        """Read a 1-based choice and return it 0-based, or None if out of range."""
        raw = self._ask(prompt).strip()
        if not raw.isdigit():
            return None
        index = int(raw)
        if index < 1 or index > count:
            return None
        return index - 1

    def _show_welcome(self) -> None:
        self._say("app_title")
        self._say("app_welcome")
        self._say("app_title")
        self._write("")
        for line in self._catalog.menu("main").lines():
            self._write(line)
        self._write("")


def build_application(
    settings: Settings,
    catalog: Catalog,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> PhoneApplication:
    """Wire JSON-file repositories into the services and return the shell."""
    contacts_repo = JsonFileRepository(settings.contacts_file, Contact)
    history_repo = JsonFileRepository(settings.call_history_file, CallRecord)
    warnings = [r.load_warning for r in (history_repo, contacts_repo) if r.load_warning]
    return PhoneApplication(
        ContactService(contacts_repo),
        CallHistoryService(history_repo),
        ExportService(),
        catalog,
        export_path=settings.export_file,
        read_line=read_line,
        write=write,
        startup_warnings=warnings,
    )

"""Export the contact list to a human-readable text file."""

import asyncio
import logging
from pathlib import Path

from sphone.domain import Contact

logger = logging.getLogger(__name__)


def build_export_content(contacts: list[Contact]) -> str:
    """One block per contact labelled A), B), ... followed by a blank line."""
    lines: list[str] = []
    for i, contact in enumerate(contacts):
        lines.append(f"Contact {chr(ord('A') + i)}) {contact.name}")
        if contact.phone_numbers:
            for entry in contact.phone_numbers:
                lines.append(f"  Number: {entry.number} ({entry.type.value})")
        else:
            lines.append("  No phone numbers")
        lines.append("")
    return "".join(line + "\n" for line in lines)


class ExportService:
    async def export_contacts(self, contacts: list[Contact], path: Path | str) -> int:
        """Write the export file off the event loop. Returns how many contacts were written."""
        if not contacts:
            raise ValueError("No contacts available to export.")
        content = build_export_content(contacts)
        target = Path(path)
        await asyncio.to_thread(target.write_text, content, encoding="utf-8")
        logger.info("Exported %d contact(s) to %s", len(contacts), target)
        return len(contacts)

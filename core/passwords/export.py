"""
Text renderings of a generated batch for download or clipboard use.
"""

import csv
import io
from typing import Iterable

from core.models.generation import GeneratedPassword


def to_csv(passwords: Iterable[GeneratedPassword]) -> str:
    """CSV with a `Password,BCrypt Hash` header, every field quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    buffer.write("Password,BCrypt Hash\n")
    for entry in passwords:
        writer.writerow([entry.password, entry.hash])
    return buffer.getvalue()


def to_text(passwords: Iterable[GeneratedPassword]) -> str:
    """Human-readable report, one numbered block per password."""
    lines = ["Generated Passwords and Hashes", "=" * 32, ""]
    for number, entry in enumerate(passwords, start=1):
        lines.append(f"Password #{number}")
        lines.append(f"Password: {entry.password}")
        lines.append(f"BCrypt Hash: {entry.hash}")
        lines.append("")
    return "\n".join(lines) + "\n"


def to_clipboard_text(passwords: Iterable[GeneratedPassword]) -> str:
    """Compact listing suited to pasting."""
    return "".join(
        f"Password #{number}: {entry.password}\nHash: {entry.hash}\n\n"
        for number, entry in enumerate(passwords, start=1)
    )

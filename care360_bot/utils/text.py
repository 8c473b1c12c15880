"""
Text processing utilities.
"""

from typing import List

# Telegram rejects message texts longer than this.
MAX_MESSAGE_LENGTH = 4096


def split_text(text: str, limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Split text into chunks of at most ``limit`` characters, on line boundaries."""
    if len(text) <= limit:
        return [text]

    chunks: List[str] = []
    current = ""

    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]

        candidate = f"{current}\n{line}" if current else line
        if len(candidate) <= limit:
            current = candidate
        else:
            chunks.append(current)
            current = line

    if current:
        chunks.append(current)

    return chunks


def utf8_length(text: str) -> int:
    return len(text.encode("utf-8"))

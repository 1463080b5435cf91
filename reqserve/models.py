from __future__ import annotations

from collections.abc import Iterable

from .headers import BodyFraming


class Request:
    """
    What one connection sent: raw header lines in wire order plus the
    assembled body text.
    """

    def __init__(
        self,
        header_lines: Iterable[str],
        framing: BodyFraming,
        body: str = "",
    ) -> None:
        self.header_lines: list[str] = list(header_lines)
        self.framing = framing
        self.body = body

    @property
    def request_line(self) -> str:
        return self.header_lines[0] if self.header_lines else ""

    def get_all(self, name: str) -> list[str]:
        """Return every value for ``name`` (case-insensitive), in wire order."""
        wanted = name.lower()
        values: list[str] = []
        for line in self.header_lines[1:]:
            key, sep, value = line.partition(":")
            if sep and key.strip().lower() == wanted:
                values.append(value.strip())
        return values

    def get(self, name: str, default: str | None = None) -> str | None:
        values = self.get_all(name)
        return values[0] if values else default

    def __repr__(self) -> str:
        return (
            f"<Request [{self.request_line!r}] {len(self.header_lines)} lines, "
            f"{len(self.body)} chars>"
        )

"""Formatter for the departure board."""

from departure_board.domain.models.train import Train, TrainStatus
from departure_board.domain.time_math import effective_window, to_hhmm

COLUMNS = ("Time", "Train", "From", "To", "Plat", "Status")


class BoardFormatter:
    """Formats trains, platforms and announcements as plain text."""

    def format_window(self, train: Train, separator: str = " → ") -> str:
        """Format the effective window, e.g. '08:10 → 08:20'."""
        window = effective_window(train)
        return f"{to_hhmm(window.arrive)}{separator}{to_hhmm(window.depart)}"

    def format_platform(self, train: Train) -> str:
        platform = train.display_platform
        return "-" if platform is None else str(platform)

    def format_row(self, train: Train) -> tuple[str, ...]:
        return (
            self.format_window(train),
            train.train_no,
            train.origin,
            train.destination,
            self.format_platform(train),
            train.status.label,
        )

    def format_table(self, trains: list[Train], status: TrainStatus | None = None) -> list[str]:
        """Format the departures table, optionally filtered by status."""
        rows = [COLUMNS] + [
            self.format_row(t) for t in trains if status is None or t.status is status
        ]
        widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]
        return ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]

    def format_platforms(self, trains: list[Train], num_platforms: int) -> list[str]:
        """Format one line per platform listing the trains shown on it."""
        lines = []
        for platform in range(1, num_platforms + 1):
            cards = [
                f"{t.train_no} {self.format_window(t, '–')} {t.status.label}"
                for t in trains
                if t.display_platform == platform
            ]
            lines.append(f"Platform {platform}: {' | '.join(cards) if cards else '—'}")
        return lines

    def format_board(
        self,
        clock: str,
        trains: list[Train],
        num_platforms: int,
        announcements: list[str],
        status: TrainStatus | None = None,
    ) -> str:
        """Format the complete board."""
        lines = [f"=== Departures {clock} ==="]
        lines.extend(self.format_table(trains, status))
        lines.append("")
        lines.extend(self.format_platforms(trains, num_platforms))
        if announcements:
            lines.append("")
            lines.append("Announcements:")
            lines.extend(f"  {a}" for a in announcements)
        return "\n".join(lines)

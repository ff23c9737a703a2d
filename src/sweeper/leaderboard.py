"""
Leaderboard store for Minesweeper.

Persists the best completion times as 'MM:SS,Name' lines, fastest first,
capped at MAX_ENTRIES. The file is the only source of truth: every
submission reloads it and rewrites it in full.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .display import format_clock, parse_clock

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_ENTRIES = 5
MAX_NAME_LENGTH = 10


# ============================================================================
# Entries
# ============================================================================

@dataclass(frozen=True)
class LeaderboardEntry:
    """
    A single completion time.

    Attributes:
        elapsed_seconds: Completion time in whole seconds.
        player_name: Name shown on the board.
    """

    elapsed_seconds: int
    player_name: str

    @property
    def clock(self) -> str:
        """Completion time as MM:SS."""
        return format_clock(self.elapsed_seconds)

    def to_line(self) -> str:
        """Serialize as 'MM:SS,Name'."""
        return f"{self.clock},{self.player_name}"

    @classmethod
    def from_line(cls, line: str) -> "LeaderboardEntry":
        """
        Parse a 'MM:SS,Name' line; the name is everything after the first comma.

        Raises:
            ValueError: If the comma is missing or the time is unparsable.
        """
        clock, comma, name = line.partition(",")
        if not comma:
            raise ValueError(f"Missing comma in leaderboard line: {line!r}")
        return cls(parse_clock(clock), name)


@dataclass(frozen=True)
class Standing:
    """An entry with its 1-based place and whether it is this session's."""

    place: int
    entry: LeaderboardEntry
    highlighted: bool = False

    def __str__(self) -> str:
        marker = "*" if self.highlighted else ""
        return f"{self.place}.\t{self.entry.clock}\t{self.entry.player_name}{marker}"


def check_player_name(name: str) -> None:
    """Raise ValueError if the name would break the 'MM:SS,Name' line format."""
    if "," in name or "\n" in name or "\r" in name:
        raise ValueError(f"Player name cannot contain commas or newlines: {name!r}")


def normalize_player_name(raw: str) -> str:
    """
    Apply the name-entry rules: letters only, at most MAX_NAME_LENGTH,
    first letter upper-case and the rest lower-case.
    """
    letters = [char for char in raw if char.isalpha()][:MAX_NAME_LENGTH]
    if not letters:
        return ""
    return letters[0].upper() + "".join(letters[1:]).lower()


# ============================================================================
# Store
# ============================================================================

class Leaderboard:
    """
    File-backed top-N leaderboard.

    Access is strictly load-modify-store; no locking is attempted.
    """

    def __init__(
        self,
        path: Union[str, Path],
        capacity: int = MAX_ENTRIES,
    ) -> None:
        """
        Initialize the store.

        Args:
            path: Leaderboard file; it need not exist yet.
            capacity: Number of entries kept.
        """
        self.path = Path(path)
        self.capacity = capacity

    def load(self) -> List[LeaderboardEntry]:
        """
        Read persisted entries in file order.

        A missing file yields an empty list. Malformed lines are skipped
        one at a time so the remaining entries survive.
        """
        if not self.path.exists():
            logger.debug("No leaderboard at %s yet", self.path)
            return []

        entries = []
        # Decoded per line so one undecodable line is skipped like any other
        with open(self.path, "rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                    if not line.strip():
                        continue
                    entries.append(LeaderboardEntry.from_line(line))
                except ValueError as error:
                    logger.warning(
                        "Skipping leaderboard line %d in %s: %s",
                        line_number, self.path, error,
                    )
        logger.debug("Loaded %d leaderboard entries", len(entries))
        return entries

    def _save(self, entries: List[LeaderboardEntry]) -> None:
        """Overwrite the file with the given entries."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            for entry in entries:
                f.write(entry.to_line() + "\n")

    def submit(self, elapsed_seconds: int, player_name: str) -> Optional[int]:
        """
        Record a completion time.

        Existing entries keep priority over the new one on equal times.

        Args:
            elapsed_seconds: Completion time in whole seconds.
            player_name: Name to record; must not contain a comma or newline.

        Returns:
            0-based rank of the new entry in the persisted list, or None if
            it did not make the cut.

        Raises:
            ValueError: On a negative time or an unstorable name.
        """
        if elapsed_seconds < 0:
            raise ValueError(f"Elapsed time cannot be negative: {elapsed_seconds}")
        check_player_name(player_name)

        new_entry = LeaderboardEntry(int(elapsed_seconds), player_name)
        candidates = [(entry, False) for entry in self.load()]
        candidates.append((new_entry, True))
        candidates.sort(key=lambda candidate: candidate[0].elapsed_seconds)
        kept = candidates[:self.capacity]

        self._save([entry for entry, _ in kept])

        rank = next(
            (index for index, (_, is_new) in enumerate(kept) if is_new),
            None,
        )
        logger.info(
            "Submitted %s for %s: %s",
            new_entry.clock, player_name,
            "not ranked" if rank is None else f"rank {rank + 1}",
        )
        return rank

    def standings(self, highlight_rank: Optional[int] = None) -> List[Standing]:
        """
        Persisted entries for display.

        Args:
            highlight_rank: 0-based rank returned by submit, marking this
                session's entry.
        """
        return [
            Standing(index + 1, entry, highlighted=index == highlight_rank)
            for index, entry in enumerate(self.load())
        ]

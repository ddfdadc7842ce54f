"""Player records and the seating around the table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from bangtable.cards import CharacterType, JobType, SymbolType


@dataclass(frozen=True)
class CardSymbol:
    """Identifies a card by its suit symbol and number."""

    symbol_type: SymbolType
    symbol_number: int


@dataclass
class PlayerInformation:
    """Everything the table knows about one player."""

    unique_id: int = 0
    name: str = ""
    max_health: int = 0
    current_health: int = 0
    range_to_me: int = 0
    range_from_me: int = 0
    job_type: JobType = JobType.OFFICER
    character_type: CharacterType = CharacterType.NONE
    my_cards: list[CardSymbol] = field(default_factory=list)
    equipped_cards: list[CardSymbol] = field(default_factory=list)


@dataclass
class PlayerCollection:
    """Players in seating order; the table wraps around."""

    players: list[PlayerInformation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[PlayerInformation]:
        return iter(self.players)

    def __contains__(self, unique_id: object) -> bool:
        return any(player.unique_id == unique_id for player in self.players)

    def calculate_distance(self, index_a: int, index_b: int) -> int:
        """Seat distance between two indices, going the shorter way round."""
        total = len(self.players)
        if total == 0:
            raise ValueError("no players seated")
        direct = abs(index_a - index_b)
        return min(direct, total - direct)

    def find_player(self, unique_id: int) -> tuple[int, PlayerInformation]:
        """Return the seat index and record of the player with this id."""
        for index, player in enumerate(self.players):
            if player.unique_id == unique_id:
                return index, player
        raise KeyError(unique_id)
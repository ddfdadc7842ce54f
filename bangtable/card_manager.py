"""Deck bookkeeping: dealing, discarding, reshuffling and role selection."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Optional

from bangtable.cards import (
    CardDataAsset,
    Card,
    CardType,
    CharacterCard,
    CharacterType,
    JobCard,
    JobType,
    SymbolType,
)


class DeckType(Enum):
    """Which pile a card lookup searches."""

    HANDED_CARD = 0
    USED_CARDS = 1
    AVAIL_CARDS = 2


class CardManager:
    """Keeps the piles of a game: cards dealt out, discarded and still to draw."""

    def __init__(
        self,
        card_data: Optional[CardDataAsset] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.card_data = card_data
        self._rng = rng if rng is not None else random.Random()
        self._all: list[Card] = []
        self._passive: list[Card] = []
        self._active: list[Card] = []
        self._characters: list[Card] = []
        self._jobs: list[Card] = []
        self._used: list[Card] = []
        self._handed: list[Card] = []
        self._available: list[Card] = []

    # Read-only views of the piles.
    @property
    def all_cards(self) -> tuple[Card, ...]:
        return tuple(self._all)

    @property
    def passive_cards(self) -> tuple[Card, ...]:
        return tuple(self._passive)

    @property
    def active_cards(self) -> tuple[Card, ...]:
        return tuple(self._active)

    @property
    def character_cards(self) -> tuple[Card, ...]:
        return tuple(self._characters)

    @property
    def job_cards(self) -> tuple[Card, ...]:
        return tuple(self._jobs)

    @property
    def used(self) -> tuple[Card, ...]:
        return tuple(self._used)

    @property
    def handed(self) -> tuple[Card, ...]:
        return tuple(self._handed)

    @property
    def available(self) -> tuple[Card, ...]:
        return tuple(self._available)

    def _has_source_cards(self) -> bool:
        return bool(self._characters or self._passive or self._active or self._jobs)

    def play_begin_by_role(self) -> None:
        """Prepare the piles at the start of a game."""
        self.load_all_cards()
        self.shuffle_deck()
        self.reorder_cards()

    def load_all_cards(self) -> None:
        """Reset every pile and sort the data asset's cards by kind."""
        if self.card_data is None:
            return
        for pile in (
            self._all,
            self._characters,
            self._passive,
            self._active,
            self._jobs,
            self._used,
            self._handed,
            self._available,
        ):
            pile.clear()

        piles = {
            CardType.JOB_CARD: self._jobs,
            CardType.ACTIVE_CARD: self._active,
            CardType.PASSIVE_CARD: self._passive,
            CardType.CHARACTER_CARD: self._characters,
        }
        for card in self.card_data.cards:
            if card is None:
                continue
            self._all.append(card)
            piles[card.card_type].append(card)

    def shuffle_deck(self) -> None:
        """Shuffle the character, passive, active and job piles."""
        if not self._has_source_cards():
            return
        for pile in (self._characters, self._passive, self._active, self._jobs):
            self._rng.shuffle(pile)

    def reorder_cards(self) -> None:
        """Fill the draw pile: first from the play cards, later from the discards."""
        if not self._has_source_cards():
            return
        if not self._used and not self._handed and not self._available:
            self._available.extend(self._passive)
            self._available.extend(self._active)
        else:
            self._rng.shuffle(self._used)
            self._available.extend(self._used)
            self._used.clear()

    def hand_cards(self, count: int) -> list[Card]:
        """Deal cards from the top of the draw pile, refilling it when it runs low."""
        if len(self._available) <= count or not self._available:
            self.reorder_cards()
        if count > len(self._available):
            raise IndexError(
                f"cannot deal {count} cards, only {len(self._available)} left"
            )
        dealt = self._available[:count] if count > 0 else []
        del self._available[: len(dealt)]
        self._handed.extend(dealt)
        return dealt

    @staticmethod
    def _move(card: Card, source: list[Card], target: list[Card]) -> None:
        for index, held in enumerate(source):
            if held is card:
                del source[index]
                target.append(card)
                return

    def reorder_used_cards(self, card: Card) -> None:
        """Move a dealt card onto the discard pile."""
        self._move(card, self._handed, self._used)

    def reorder_avail_cards(self, card: Card) -> None:
        """Move a dealt card back onto the draw pile."""
        self._move(card, self._handed, self._available)

    def find_card(
        self, symbol_type: SymbolType, symbol_number: int, deck_type: DeckType
    ) -> Optional[Card]:
        """Find a card by symbol and number in one of the piles."""
        if not self._handed and not self._used:
            return None
        pile = {
            DeckType.HANDED_CARD: self._handed,
            DeckType.USED_CARDS: self._used,
            DeckType.AVAIL_CARDS: self._available,
        }[deck_type]
        return next(
            (card for card in pile if card.matches(symbol_type, symbol_number)), None
        )

    def find_card_in_data(
        self, symbol_type: SymbolType, symbol_number: int
    ) -> Optional[Card]:
        """Find a card by symbol and number in the data asset itself."""
        if self.card_data is None:
            return None
        for card in self.card_data.cards:
            if card is None:
                return None
            if card.matches(symbol_type, symbol_number):
                return card
        return None

    def health_for_character(self, character_type: CharacterType) -> int:
        """Starting health of a character, or 0 if it is not in the data."""
        if self.card_data is None:
            return 0
        for card in self.card_data.cards:
            if card is None:
                return 0
            if isinstance(card, CharacterCard) and card.character_type == character_type:
                return card.health
        return 0

    def jobs_for_players(self, player_count: int) -> list[JobType]:
        """Pick and shuffle the roles for a table of 4 to 7 players."""
        if player_count < 4 or player_count > 7:
            return []
        remaining = {
            JobType.OFFICER: 1,
            JobType.SUB_OFFICER: (2 if player_count >= 7 else 1) if player_count >= 5 else 0,
            JobType.OUTLAW: 2 if player_count in (4, 5) else 3,
            JobType.BETRAYER: 1,
        }
        selected: list[JobType] = []
        for card in self._jobs:
            if card.card_type != CardType.JOB_CARD or not isinstance(card, JobCard):
                continue
            if remaining[card.job_type]:
                selected.append(card.job_type)
                remaining[card.job_type] -= 1
        self._rng.shuffle(selected)
        return selected

    def draw_character(self) -> CharacterType:
        """Take the top character card, or NONE when none are left."""
        if not self._characters:
            return CharacterType.NONE
        card = self._characters.pop(0)
        if not isinstance(card, CharacterCard):
            raise TypeError("character pile holds a card that is not a character")
        return card.character_type

    def _extend_data(self, cards: Iterable[Card]) -> None:
        if self.card_data is None:
            self.card_data = CardDataAsset()
        self.card_data.cards.extend(cards)


class GameInstance:
    """Long-lived owner of the card manager across levels."""

    def __init__(
        self,
        card_data: Optional[CardDataAsset] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._card_data = card_data
        self._rng = rng
        self._card_manager: Optional[CardManager] = None

    def init(self) -> None:
        """Create the card manager if it does not exist yet."""
        if self._card_manager is None:
            self._card_manager = CardManager(self._card_data, self._rng)

    def get_card_manager(self) -> Optional[CardManager]:
        """The card manager, or None before init has run."""
        return self._card_manager
"""Per-player state on the server: hand, turn ending and range checks."""

from __future__ import annotations

from typing import Iterable, Optional

from bangtable.card_manager import CardManager, DeckType
from bangtable.cards import CharacterType, JobType, PassiveCard, PassiveType
from bangtable.game_mode import GameMode
from bangtable.players import CardSymbol, PlayerInformation


class PlayerState:
    """One player's record together with the actions it takes on the table."""

    def __init__(
        self,
        player_info: Optional[PlayerInformation] = None,
        game_mode: Optional[GameMode] = None,
        card_manager: Optional[CardManager] = None,
    ) -> None:
        self.player_info = player_info if player_info is not None else PlayerInformation()
        self.game_mode = game_mode
        self._card_manager = card_manager

    @property
    def card_manager(self) -> Optional[CardManager]:
        if self._card_manager is not None:
            return self._card_manager
        if self.game_mode is not None:
            return self.game_mode.card_manager
        return None

    def add_cards(self, cards: Iterable[CardSymbol]) -> None:
        """Put drawn cards into the player's hand."""
        self.player_info.my_cards.extend(cards)

    def end_turn(self) -> int:
        """End the turn, or return how many cards must be discarded first.

        Returns 0 once the turn has been handed back to the game mode.
        """
        excess = len(self.player_info.my_cards) - self.player_info.current_health
        if excess > 0:
            return excess
        if self.game_mode is None:
            raise RuntimeError("no game mode to end the turn with")
        self.game_mode.end_turn(
            self.player_info.unique_id, self.player_info.character_type
        )
        return 0

    def end_turn_remove_cards(self, cards: Iterable[CardSymbol]) -> None:
        """Drop the chosen cards from the hand and send them to the discard pile."""
        to_remove = list(cards)
        hand = self.player_info.my_cards
        if not hand or not to_remove:
            return
        for symbol in to_remove:
            if symbol in hand:
                hand.remove(symbol)
        if self.game_mode is None:
            return
        for symbol in to_remove:
            self.game_mode.loose_card_from_handed(
                symbol.symbol_type, symbol.symbol_number, DeckType.USED_CARDS
            )

    def calculate_distance(self, to_unique_id: int) -> int:
        """Effective distance from this player to another seated player.

        Seats are counted the shorter way round; each scope this player has
        equipped brings targets one closer, Rose Doolan sees everyone one
        closer, and Paul Regret is seen one further away.
        """
        if self.game_mode is None:
            raise RuntimeError("no game mode to read the seating from")
        collection = self.game_mode.get_player_collection()
        my_index, me = collection.find_player(self.player_info.unique_id)
        to_index, target = collection.find_player(to_unique_id)

        distance = collection.calculate_distance(my_index, to_index)

        manager = self.card_manager
        if manager is not None:
            for symbol in self.player_info.equipped_cards:
                card = manager.find_card_in_data(
                    symbol.symbol_type, symbol.symbol_number
                )
                if isinstance(card, PassiveCard) and card.passive_type is PassiveType.SCOPE:
                    distance -= 1

        if me.character_type is CharacterType.ROSE_DOOLAN:
            distance -= 1
        if target.character_type is CharacterType.PAUL_REGRET:
            distance += 1
        return distance

    def job_type(self) -> JobType:
        """The player's secret role."""
        return self.player_info.job_type

    def character_type(self) -> CharacterType:
        """The character the player is playing."""
        return self.player_info.character_type
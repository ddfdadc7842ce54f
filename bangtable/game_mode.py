"""Server-side flow of a game: lobby, seating, roles and the turn cycle."""

from __future__ import annotations

import copy
import logging
import math
import random
from enum import Enum
from typing import Iterable, Optional

from bangtable.card_manager import CardManager, DeckType
from bangtable.cards import Card, CharacterType, JobType, SymbolType
from bangtable.players import CardSymbol, PlayerCollection, PlayerInformation

log = logging.getLogger(__name__)

Vector = tuple[float, float, float]

MIN_PLAYERS = 4
MAX_PLAYERS = 7
DEFAULT_RADIUS = 500.0
OUTLAW_BOUNTY = 3


class GameState(Enum):
    GAME_OVER = 0
    GAME_PLAYING = 1


class PlayerTurnState(Enum):
    DRAW_CARD = 0
    USE_CARD = 1
    LOOSE_CARD = 2


class GameMode:
    """Runs a game: players join a lobby, are seated, dealt roles and take turns."""

    def __init__(
        self,
        card_manager: Optional[CardManager] = None,
        rng: Optional[random.Random] = None,
        radius: float = DEFAULT_RADIUS,
    ) -> None:
        self.card_manager = card_manager
        self.radius = radius
        self._rng = rng if rng is not None else random.Random()
        self._players = PlayerCollection()
        self._lobby = PlayerCollection()
        self.player_index = 0
        self.game_state = GameState.GAME_OVER
        self.turn_state = PlayerTurnState.DRAW_CARD
        self.current_player_name = ""
        self.drawn_cards: list[Card] = []
        if card_manager is not None:
            card_manager.play_begin_by_role()

    @property
    def lobby_players(self) -> tuple[PlayerInformation, ...]:
        return tuple(self._lobby.players)

    def _ensure_lobby_open(self) -> None:
        if self.game_state is GameState.GAME_PLAYING:
            raise RuntimeError("the game is already in progress")

    def add_player(self, unique_id: int, name: str = "") -> None:
        """Register a player in the lobby."""
        self._ensure_lobby_open()
        if unique_id in self._lobby:
            log.warning("duplicate player id %s - not adding", unique_id)
            raise ValueError(f"player {unique_id} is already in the lobby")
        self._lobby.players.append(PlayerInformation(unique_id=unique_id, name=name))

    def remove_player(self, unique_id: int) -> None:
        """Take a player out of the lobby."""
        self._ensure_lobby_open()
        index, _ = self._lobby.find_player(unique_id)
        del self._lobby.players[index]

    def _arrange_seats(self) -> None:
        self._players.players.extend(copy.deepcopy(p) for p in self._lobby.players)
        self._shuffle_seats(self._players)

    def _shuffle_seats(self, collection: PlayerCollection) -> None:
        if (
            self.game_state is GameState.GAME_PLAYING
            or not MIN_PLAYERS <= len(collection) <= MAX_PLAYERS
        ):
            return
        self._rng.shuffle(collection.players)

    def start_game(self) -> None:
        """Seat the lobby, deal roles and characters, and start the officer's turn."""
        self._ensure_lobby_open()
        if self.card_manager is None:
            raise RuntimeError("no card manager to deal from")
        count = len(self._lobby)
        if not MIN_PLAYERS <= count <= MAX_PLAYERS:
            raise ValueError(
                f"a game needs {MIN_PLAYERS} to {MAX_PLAYERS} players, not {count}"
            )
        jobs = self.card_manager.jobs_for_players(count)
        if len(jobs) < count:
            raise ValueError(f"only {len(jobs)} job cards for {count} players")

        self._arrange_seats()
        self.game_state = GameState.GAME_PLAYING

        manager = self.card_manager
        for index, (player, job) in enumerate(zip(self._players.players, jobs)):
            player.job_type = job
            player.character_type = manager.draw_character()
            # The health comes from a second character card drawn off the pile.
            player.max_health = manager.health_for_character(manager.draw_character())
            if job is JobType.OFFICER:
                self.current_player_name = player.name
                self.player_index = index

        for player in self._players:
            log.debug(
                "player %s: job %s, health %s, character %s",
                player.name,
                player.job_type.name,
                player.max_health,
                player.character_type.name,
            )
        self.advance_game_turn()

    def get_player_collection(self) -> PlayerCollection:
        """A copy of the seated players."""
        return copy.deepcopy(self._players)

    def _draw_for(self, character: CharacterType) -> list[Card]:
        manager = self.card_manager
        assert manager is not None
        if character is CharacterType.KIT_CARLSON:
            return manager.hand_cards(3)
        cards = manager.hand_cards(2)
        if character is CharacterType.BLACK_JACK and cards[1].symbol_type in (
            SymbolType.HEART,
            SymbolType.DIAMOND,
        ):
            cards.extend(manager.hand_cards(1))
        return cards

    def advance_game_turn(self) -> None:
        """Move the current player's turn on by one phase."""
        if self.game_state is GameState.GAME_OVER or self.card_manager is None:
            return
        if self.turn_state is PlayerTurnState.DRAW_CARD:
            current = self._players.players[self.player_index]
            self.drawn_cards = self._draw_for(current.character_type)
            self.turn_state = PlayerTurnState.USE_CARD
            self.advance_game_turn()
        elif self.turn_state is PlayerTurnState.LOOSE_CARD:
            self.advance_player_turn()

    def advance_player_turn(self) -> None:
        """Hand the turn to the next seat and start its draw phase."""
        if not self._players.players:
            raise RuntimeError("no players seated")
        self.player_index = (self.player_index + 1) % len(self._players)
        self.current_player_name = self._players.players[self.player_index].name
        self.turn_state = PlayerTurnState.DRAW_CARD
        self.advance_game_turn()

    def end_turn(self, unique_id: int, character_type: CharacterType) -> None:
        """Finish the current player's turn."""
        self.turn_state = PlayerTurnState.LOOSE_CARD
        self.advance_game_turn()

    def loose_card_from_handed(
        self, symbol_type: SymbolType, symbol_number: int, deck_type: DeckType
    ) -> None:
        """Return a dealt card to the discard or the draw pile."""
        if self.card_manager is None or deck_type is DeckType.HANDED_CARD:
            return
        card = self.card_manager.find_card(
            symbol_type, symbol_number, DeckType.HANDED_CARD
        )
        if card is None:
            return
        if deck_type is DeckType.USED_CARDS:
            self.card_manager.reorder_used_cards(card)
        else:
            self.card_manager.reorder_avail_cards(card)

    def loose_sid_ketchum_card(self, cards: Iterable[Card]) -> None:
        """Discard the two cards Sid Ketchum gives up to regain a life point."""
        cards = list(cards)
        if len(cards) != 2:
            raise ValueError("Sid Ketchum discards exactly two cards")
        if self.card_manager is None:
            raise RuntimeError("no card manager to discard to")
        for card in cards:
            self.card_manager.reorder_used_cards(card)

    def player_dead(
        self,
        unique_id: int,
        character_type: CharacterType,
        job_type: JobType,
        cards: Iterable[Card],
    ) -> list[Card]:
        """Remove a dead player; killing an outlaw pays a bounty, which is returned."""
        bounty: list[Card] = []
        if job_type is JobType.OUTLAW and self.card_manager is not None:
            bounty = self.card_manager.hand_cards(OUTLAW_BOUNTY)
        for index, player in enumerate(self._players.players):
            if player.unique_id == unique_id:
                del self._players.players[index]
                break
        return bounty

    def draw_card(self, symbol: CardSymbol) -> Optional[Card]:
        """Look a card up on the draw pile by its symbol."""
        if self.card_manager is None:
            return None
        return self.card_manager.find_card(
            symbol.symbol_type, symbol.symbol_number, DeckType.AVAIL_CARDS
        )

    def spawn_layout(self, center: Vector, count: int) -> list[tuple[Vector, float]]:
        """Places and yaw angles (degrees) for figures in a circle facing its centre."""
        if count <= 0:
            log.warning("no players available for spawning")
            return []
        cx, cy, cz = center
        layout = []
        for i in range(count):
            angle = 2 * math.pi / count * i
            location = (
                cx + math.cos(angle) * self.radius,
                cy + math.sin(angle) * self.radius,
                cz,
            )
            yaw = math.degrees(math.atan2(cy - location[1], cx - location[0]))
            layout.append((location, yaw))
        return layout
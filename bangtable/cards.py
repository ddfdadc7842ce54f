"""Card kinds, symbols and the card definitions that make up a deck."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class _Labelled(Enum):
    """Enum whose members carry a human-readable display name."""

    @property
    def display_name(self) -> str:
        label = _DISPLAY_NAMES.get(self)
        if label is not None:
            return label
        return "".join(part.capitalize() for part in self.name.split("_"))


class CardType(_Labelled):
    JOB_CARD = 0
    ACTIVE_CARD = 1
    PASSIVE_CARD = 2
    CHARACTER_CARD = 3


class SymbolType(_Labelled):
    HEART = 0
    SPADE = 1
    CLOVER = 2
    DIAMOND = 3
    NONE = 4


class JobType(_Labelled):
    OFFICER = 0
    SUB_OFFICER = 1
    OUTLAW = 2
    BETRAYER = 3


class ActiveType(_Labelled):
    NONE = 0
    BANG = 1  # attack
    MISSED = 2  # defence
    STAGECOACH = 3  # draw two cards
    WELLS_FARGO_BANK = 4  # draw three cards
    BEER = 5  # regain one life point
    GATLING_GUN = 6  # attack every other player
    ROBBERY = 7  # steal one card
    CAT_BALOU = 8  # force a discard
    SALOON = 9  # everyone regains a life point
    DUEL = 10  # trade bangs until one side gives up
    GENERAL_STORE = 11  # everyone picks a card
    INDIANS = 12  # everyone must discard a bang
    JAIL = 13  # may lose a turn
    DYNAMITE = 14  # may explode


class PassiveType(_Labelled):
    NONE = 0
    BARREL = 1
    SCOPE = 2
    MUSTANG = 3
    SCHOFIELD = 4
    VOLCANIC = 5
    REMINGTON = 6
    CARBINE = 7
    WINCHESTER = 8


class CharacterType(_Labelled):
    NONE = 0
    PAUL_REGRET = 1
    BART_CASSIDY = 2
    CALAMITY_JANET = 3
    JOURDONNAIS = 4
    PEDRO_RAMIREZ = 5
    BLACK_JACK = 6
    JESSE_JONES = 7
    SUZY_LAFAYETTE = 8
    SID_KETCHUM = 9
    LUCKY_DUKE = 10
    SLAB_THE_KILLER = 11
    EL_GRINGO = 12
    ROSE_DOOLAN = 13
    WILLY_THE_KID = 14
    VULTURE_SAM = 15
    KIT_CARLSON = 16


_DISPLAY_NAMES: dict[Enum, str] = {
    ActiveType.WELLS_FARGO_BANK: "Wells Fargo Bank",
    ActiveType.GATLING_GUN: "Gatling Gun",
    ActiveType.CAT_BALOU: "Cat Balou",
    ActiveType.GENERAL_STORE: "General Store",
    CharacterType.PAUL_REGRET: "Paul Regret",
    CharacterType.BART_CASSIDY: "Bart Cassidy",
    CharacterType.CALAMITY_JANET: "Calamity Janet",
    CharacterType.PEDRO_RAMIREZ: "Pedro Ramirez",
    CharacterType.BLACK_JACK: "Black Jack",
    CharacterType.JESSE_JONES: "Jesse Jones",
    CharacterType.SUZY_LAFAYETTE: "Suzy Lafayette",
    CharacterType.SID_KETCHUM: "Sid Ketchum",
    CharacterType.LUCKY_DUKE: "Lucky Duke",
    CharacterType.SLAB_THE_KILLER: "Slab the Killer",
    CharacterType.EL_GRINGO: "El Gringo",
    CharacterType.ROSE_DOOLAN: "Rose Doolan",
    CharacterType.WILLY_THE_KID: "Willy the Kid",
    CharacterType.VULTURE_SAM: "Vulture Sam",
    CharacterType.KIT_CARLSON: "Kit Carlson",
}


@dataclass(eq=False, kw_only=True)
class Card:
    """A single card; cards compare by identity, as each one is a distinct object."""

    name: str = "Default Item"
    description: str = "Default Description"
    card_type: CardType = CardType.JOB_CARD
    icon: Optional[Any] = None
    sound_effect: Optional[Any] = None
    mesh: Optional[Any] = None
    particle_effect: Optional[Any] = None
    symbol_type: SymbolType = SymbolType.HEART
    symbol_number: int = 0

    def matches(self, symbol_type: SymbolType, symbol_number: int) -> bool:
        """Return True if this card carries the given symbol and number."""
        return self.symbol_type == symbol_type and self.symbol_number == symbol_number


@dataclass(eq=False, kw_only=True)
class ActiveCard(Card):
    """A card that is played for an immediate effect."""

    active_type: ActiveType = ActiveType.BANG


@dataclass(eq=False, kw_only=True)
class CharacterCard(Card):
    """A character, with its starting health."""

    health: int = 4
    character_type: CharacterType = CharacterType.JOURDONNAIS


@dataclass(eq=False, kw_only=True)
class JobCard(Card):
    """A secret role dealt at the start of the game."""

    job_type: JobType = JobType.OFFICER


@dataclass(eq=False, kw_only=True)
class PassiveCard(Card):
    """A card that is equipped in front of the player."""

    passive_type: PassiveType = PassiveType.BARREL
    is_weapon: bool = False


@dataclass
class CardDataAsset:
    """The full list of card definitions a deck is built from."""

    cards: list[Optional[Card]] = field(default_factory=list)
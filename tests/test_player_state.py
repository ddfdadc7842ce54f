import random

import pytest

from bangtable.card_manager import CardManager
from bangtable.cards import (
    ActiveCard,
    ActiveType,
    CardDataAsset,
    CardType,
    CharacterCard,
    CharacterType,
    JobCard,
    JobType,
    PassiveCard,
    PassiveType,
    SymbolType,
)
from bangtable.game_mode import GameMode, PlayerTurnState
from bangtable.players import CardSymbol, PlayerInformation
from bangtable.player_state import PlayerState

IDS = [11, 22, 33, 44]


def make_game(character=CharacterType.JOURDONNAIS):
    cards = [
        JobCard(card_type=CardType.JOB_CARD, job_type=job)
        for job in (JobType.OFFICER, JobType.OUTLAW, JobType.OUTLAW, JobType.BETRAYER)
    ]
    cards += [
        CharacterCard(card_type=CardType.CHARACTER_CARD, character_type=character, health=4)
        for _ in range(8)
    ]
    cards += [
        ActiveCard(
            card_type=CardType.ACTIVE_CARD,
            active_type=ActiveType.BANG,
            symbol_type=SymbolType.DIAMOND,
            symbol_number=n,
        )
        for n in range(1, 31)
    ]
    cards.append(
        PassiveCard(
            card_type=CardType.PASSIVE_CARD,
            passive_type=PassiveType.SCOPE,
            symbol_type=SymbolType.SPADE,
            symbol_number=1,
        )
    )
    manager = CardManager(CardDataAsset(cards), random.Random(3))
    game = GameMode(manager, random.Random(5))
    for uid in IDS:
        game.add_player(uid, f"player{uid}")
    game.start_game()
    return game


def base_distance(game, a, b):
    collection = game.get_player_collection()
    ia, _ = collection.find_player(a)
    ib, _ = collection.find_player(b)
    return collection.calculate_distance(ia, ib)


def test_add_cards_appends_to_hand():
    state = PlayerState(PlayerInformation(unique_id=1))
    symbols = [CardSymbol(SymbolType.HEART, 3), CardSymbol(SymbolType.SPADE, 7)]
    state.add_cards(symbols)
    state.add_cards([CardSymbol(SymbolType.CLOVER, 2)])
    assert state.player_info.my_cards == symbols + [CardSymbol(SymbolType.CLOVER, 2)]


def test_job_and_character_type():
    info = PlayerInformation(
        unique_id=1, job_type=JobType.OUTLAW, character_type=CharacterType.SID_KETCHUM
    )
    state = PlayerState(info)
    assert state.job_type() is JobType.OUTLAW
    assert state.character_type() is CharacterType.SID_KETCHUM


def test_end_turn_with_too_many_cards_asks_for_discard():
    game = make_game()
    info = PlayerInformation(unique_id=IDS[0], current_health=1)
    state = PlayerState(info, game)
    state.add_cards([CardSymbol(SymbolType.HEART, n) for n in (1, 2, 3)])
    index_before = game.player_index
    assert state.end_turn() == 2
    assert game.player_index == index_before


def test_end_turn_passes_turn_to_next_seat():
    game = make_game()
    info = PlayerInformation(unique_id=IDS[0], current_health=4)
    state = PlayerState(info, game)
    before = game.player_index
    assert state.end_turn() == 0
    assert game.player_index == (before + 1) % len(IDS)
    assert game.turn_state is PlayerTurnState.USE_CARD


def test_end_turn_without_game_mode_raises():
    state = PlayerState(PlayerInformation(unique_id=1, current_health=3))
    with pytest.raises(RuntimeError):
        state.end_turn()


def test_end_turn_remove_cards_discards_to_used_pile():
    game = make_game()
    drawn = list(game.drawn_cards)
    symbols = [CardSymbol(c.symbol_type, c.symbol_number) for c in drawn]
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    state.add_cards(symbols)
    state.end_turn_remove_cards([symbols[0]])
    assert state.player_info.my_cards == symbols[1:]
    assert drawn[0] in game.card_manager.used
    assert drawn[0] not in game.card_manager.handed


def test_end_turn_remove_cards_with_empty_hand_changes_nothing():
    game = make_game()
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    used_before = game.card_manager.used
    state.end_turn_remove_cards([CardSymbol(SymbolType.DIAMOND, 1)])
    assert state.player_info.my_cards == []
    assert game.card_manager.used == used_before


def test_distance_plain_matches_seating():
    game = make_game()
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    for other in IDS[1:]:
        assert state.calculate_distance(other) == base_distance(game, IDS[0], other)


def test_distance_is_symmetric_for_plain_characters():
    game = make_game()
    a = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    b = PlayerState(PlayerInformation(unique_id=IDS[2]), game)
    assert a.calculate_distance(IDS[2]) == b.calculate_distance(IDS[0])


def test_distance_rose_doolan_sees_closer():
    game = make_game(CharacterType.ROSE_DOOLAN)
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    assert state.calculate_distance(IDS[1]) == base_distance(game, IDS[0], IDS[1]) - 1


def test_distance_paul_regret_seen_further():
    game = make_game(CharacterType.PAUL_REGRET)
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    assert state.calculate_distance(IDS[3]) == base_distance(game, IDS[0], IDS[3]) + 1


def test_distance_scope_brings_target_closer():
    game = make_game()
    info = PlayerInformation(
        unique_id=IDS[0], equipped_cards=[CardSymbol(SymbolType.SPADE, 1)]
    )
    state = PlayerState(info, game)
    assert state.calculate_distance(IDS[1]) == base_distance(game, IDS[0], IDS[1]) - 1


def test_distance_unknown_target_raises():
    game = make_game()
    state = PlayerState(PlayerInformation(unique_id=IDS[0]), game)
    with pytest.raises(KeyError):
        state.calculate_distance(999)


def test_distance_without_game_mode_raises():
    state = PlayerState(PlayerInformation(unique_id=1))
    with pytest.raises(RuntimeError):
        state.calculate_distance(2)
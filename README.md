# bangtable

Game logic for a Wild West card-shooting table game for four to seven players, in plain Python with no third-party dependencies. It covers:

- the card catalogue: suits, roles, characters, and active and passive cards;
- a card manager that keeps the piles (draw, dealt, discard), deals cards and picks roles;
- seating around the table and the distance between seats;
- the server-side flow of a game: lobby, seating, role and character dealing, and the draw/play/discard turn cycle;
- a player's state: hand, end of turn, and effective range to another player;
- the markers placed around a player's figure: a name tag and a row of HP markers;
- URL encoding and decoding for text.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `bangtable.cards` | Enums `CardType`, `SymbolType`, `JobType`, `ActiveType`, `PassiveType` and `CharacterType`. Each member has a `display_name`, for example `"Slab the Killer"`. Card classes are `Card` (with `matches(symbol_type, symbol_number)`), `ActiveCard`, `CharacterCard`, `JobCard` and `PassiveCard`. `CardDataAsset` holds the list of card definitions. Cards compare by identity. |
| `bangtable.players` | `CardSymbol`, `PlayerInformation` and `PlayerCollection`. `calculate_distance(a, b)` gives the seat distance the shorter way round and raises `ValueError` when no one is seated. `find_player(id)` returns `(index, player)` and raises `KeyError` when the id is unknown. |
| `bangtable.card_manager` | `CardManager` loads, shuffles, deals (`hand_cards`), discards (`reorder_used_cards`), returns cards to the draw pile (`reorder_avail_cards`), looks cards up (`find_card`, `find_card_in_data`), picks roles (`jobs_for_players`), draws characters (`draw_character`) and gives a character's health (`health_for_character`). `DeckType` chooses the pile a lookup searches. `GameInstance` creates one manager on `init()` and returns it from `get_card_manager()`. |
| `bangtable.game_mode` | `GameMode` together with `GameState` and `PlayerTurnState`. It covers the lobby (`add_player`, `remove_player`), `start_game`, the turn phases (`advance_game_turn`, `advance_player_turn`, `end_turn`), discards (`loose_card_from_handed`, `loose_sid_ketchum_card`), `player_dead`, `draw_card` and `spawn_layout`. |
| `bangtable.player_state` | `PlayerState`, which provides `add_cards`, `end_turn`, `end_turn_remove_cards`, `calculate_distance`, `job_type()` and `character_type()`. |
| `bangtable.markers` | `PlayerFigure` with its `NameTag` and `HPMarker` attachments. Only an authoritative figure spawns, changes or destroys them. |
| `bangtable.urlcodec` | `url_encode(text)` percent-encodes everything except unreserved characters, using UTF-8. `url_decode(text)` reverses it and reads `+` as a space. |

Every random choice goes through a `random.Random`. Pass `rng=random.Random(seed)` to `CardManager`, `GameInstance` or `GameMode` to get repeatable shuffles.

## Example: roles and characters

```python
from bangtable.cards import CardDataAsset, CharacterCard, JobCard, JobType, CharacterType
from bangtable.card_manager import CardManager

data = CardDataAsset(cards=[
    JobCard(job_type=JobType.OFFICER),
    JobCard(job_type=JobType.OUTLAW),
    JobCard(job_type=JobType.OUTLAW),
    JobCard(job_type=JobType.BETRAYER),
    CharacterCard(character_type=CharacterType.PAUL_REGRET, health=3),
])

manager = CardManager(data)
manager.play_begin_by_role()
roles = manager.jobs_for_players(4)      # one officer, two outlaws, one betrayer, shuffled
character = manager.draw_character()     # CharacterType.PAUL_REGRET
```

`jobs_for_players` returns an empty list for fewer than 4 or more than 7 players. For 4 to 7 players it takes 1 officer, 0/1/1/2 sub-officers, 2/2/3/3 outlaws and 1 betrayer from the job cards that were loaded.

## Example: distances

```python
from bangtable.players import PlayerCollection, PlayerInformation

table = PlayerCollection([PlayerInformation(unique_id=n) for n in range(1, 6)])
table.calculate_distance(0, 4)   # 1
```

`PlayerState.calculate_distance(to_unique_id)` starts from the seat distance. Each equipped scope lowers it by 1. A Rose Doolan player sees everyone 1 closer, and a Paul Regret target is 1 further away.

## Game flow

- `GameMode.add_player(unique_id, name)` raises `ValueError` for a duplicate id.
- `add_player` and `remove_player` raise `RuntimeError` once a game is in progress.
- `start_game()` needs a card manager, 4 to 7 lobby players and enough job cards. Otherwise it raises `RuntimeError` or `ValueError`.
- `start_game()` copies the lobby into the seats and shuffles them. It gives each player a role and a character. The player's `max_health` is read from a second character card drawn off the pile.
- After dealing, `start_game()` begins the officer's turn.
- In the draw phase a player gets 2 cards. Kit Carlson gets 3. Black Jack gets 1 more when his second card is a heart or a diamond.
- The cards drawn are kept in `GameMode.drawn_cards`, and the turn moves on to the use phase.
- `end_turn` passes play to the next seat.
- `player_dead` removes the player. When the dead player is an outlaw, it deals and returns a 3-card bounty.
- `spawn_layout(center, count)` places `count` figures evenly on a circle of `radius` around `center`. Each figure gets a yaw, in degrees, that faces the centre.

## What this package does not do

It is a library of game state and rules only. It has:

- no command-line program;
- no network server or client replication;
- no rendering, input handling, HUD or chat screen;
- no storage for card sets or games.

The effects of individual active and passive cards are not resolved. No winner is decided when a player dies. Card sets are built in code as `CardDataAsset` objects.
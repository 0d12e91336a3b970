# corematch

`corematch` is the engine of a memory game played on finalized relay-chain
blocks. Each finalized block becomes a *cell* on a 3x3 board. A cell shows the
usage of the chain's cores: which cores are free and which are assigned to a
parachain. The player picks a cell and then tries to find another cell with the
same pattern.

The package holds the game rules and state and has no dependencies beyond the
standard library.

## What the package does not do

- It opens no network connections. It does not subscribe to a chain or fetch
  blocks or parachain ids. Your code builds `Block` objects and passes them in
  with `Game.on_block_received`. Parachain ids go in through
  `Game.on_parachains_collected`.
- It draws nothing and installs no command. A front end reads the game state,
  together with the plain data in `corematch.presentation`, and shows it.
- It runs no timers. `BlockTimer.tick` and `Game.on_next_level_timeout` are
  called by the caller at the right moments.
- It does not sign or store results. `Game.on_signing_finished` accepts only
  `SigningStatus.FAILED`, which ends the game. Any other status raises
  `ValueError`.

## Modules

- `corematch.support`: the supported relay chains (`SupportedRelayRuntime`)
  and their settings: RPC endpoints, token unit and decimals, grid width and
  share hashtag. `parse_relay_runtime` turns `"Polkadot"`, `"polkadot"`,
  `"DOT"`, the Kusama equivalents, or a chain prefix (`0` or `2`) into a
  runtime. For anything else it raises `ValueError`.
  `SupportedParachainRuntime` lists the asset-hub parachains.
- `corematch.core`: `Core`, `CoreView` and `CoreViewKind`, which give the
  style class and inline colour of a core, and `BlockView`.
- `corematch.block`: `Block`, with the display marks of a cell (select,
  match, miss, disable, flip, help). It also provides the usage percentage, an
  ASCII drawing and `corespace_hash`, the 32-byte BLAKE2b digest of the
  pattern. At level 1 a core only counts as free or used. At level 2 the para
  id of each core is part of the pattern.
- `corematch.game`: `BoardStatus`, `GameStatus`, `GameLevel`,
  `GameHelpStatus` and `describe_status`.
- `corematch.network`: `NetworkState` and `NetworkStatus` for the followed
  chain and its subscription. `generate_parachain_colors` gives each para id
  an evenly spaced hue and shuffles the assignment with an optional
  `random.Random`.
- `corematch.board`: `Board`, the nine cells ordered newest first. It also
  keeps a count of cells per pattern hash and the keyboard cursor, which
  wraps at the edges.
- `corematch.engine`: `Game`, the whole game: starting, selecting and matching
  cells, points, attempts, highlights, level changes and the share message.
  `runtime_from_query` reads the `chain` parameter of a query string or
  mapping and falls back to Polkadot.
- `corematch.keyboard`: `key_from_name` maps browser key names such as
  `"ArrowUp"`, `" "` or `"h"` to `SupportedKeys`.
- `corematch.block_timer`: `BlockTimer`, a six-second countdown in tenths of a
  second.
- `corematch.views` and `corematch.presentation`: plain data for a UI. This
  covers which command buttons are disabled, keyboard hints, the board
  caption, the box columns for attempts and helps, logos, the network switch
  target and the stats table.
- `corematch.utils`: read para and NFT ids from the last four bytes of a
  storage key, decode UTF-8 bytes and shorten an address.

## Rules

- A game starts with 4 attempts and 8 highlights. Moving to a new level
  restores the highlights.
- The first cell pressed becomes the cell to match. Pressing it again
  deselects it.
- A cell with the same pattern scores 4 points. Each further match against
  the same cell doubles the score, until the next block arrives.
- A wrong match uses up one attempt. When no attempts are left, the game is
  over and the board shows the options.
- When highlighting is on, each new block highlights the cells that share one
  repeated pattern. Every highlighted cell uses up one highlight.
- Reaching 32 points on level 1 moves the game to level 2. The game sets
  `pending_level`, and the caller finishes the move with
  `on_next_level_timeout` after `NEXT_LEVEL_DELAY_MS` (6000 ms).

## Keyboard

| Key              | Action                             |
|------------------|------------------------------------|
| Arrow keys       | move the cursor (wraps around)     |
| Enter            | start a game, or select/match cell |
| Space            | select or match the cell           |
| S                | start a game                       |
| H                | highlight matches                  |
| F                | flip a cell to see its details     |

## Using the engine

```python
from corematch.block import Block
from corematch.core import Core
from corematch.engine import Game
from corematch.support import SupportedRelayRuntime

game = Game()
game.on_subscription_created(1)

cores = [Core(i, 2000 if i % 2 else None) for i in range(8)]
for number in range(100, 109):
    game.on_block_received(1, Block(number, list(cores), SupportedRelayRuntime.POLKADOT))

game.start()
game.key_pressed("Enter")       # choose the cell under the cursor
game.key_pressed("ArrowRight")
game.key_pressed("Enter")       # match it against the next cell

print(game.points, game.match_class())
```

`on_block_received` ignores blocks that come from a subscription that is not
active. When a game ends, `Game.game_results()` returns
`points/duration/block number` and `Game.share_message()` returns the text to
share.
# quassimodo

Building blocks for a two-player barrier board game in the style of
Quoridor, played on a 9 × 9 board. The package provides the exceptions the
game rules raise and a base class for pieces placed on the board. It also
reads the game's resource configuration file and parses its command-line
options.

The package has no third-party dependencies.

## Modules

### `quassimodo.errors`

Every exception derives from `RulesError`, so one `except RulesError`
catches them all. The message passed in is what `str()` returns.

- `PieceOffBoard`, with its subclass `CellOffBoard`
- `BadParameters`
- `PlayerWithoutBarriers`
- `PieceNotPlaced`, with its subclass `PlayerNotPlaced`
- `PieceAlreadyPlaced`, with its subclass `PlayerAlreadyPlaced`
- `RulesBroken`
- `GameOver`
- `GameNotStarted`
- `NoChild`

### `quassimodo.piece`

`Piece` is a board position together with a "placed" flag. A new piece sits
at `(-1, -1)` and is not placed, unless a position is passed to the
constructor. In that case it takes that position but still counts as not
placed.

- `Piece.place(x, y)` puts the piece at `(x, y)` and marks it placed. It
  raises `PieceAlreadyPlaced` if the piece is already placed. It raises
  `PieceOffBoard` if `x` or `y` is 9 or more (`Piece.SIZE_X`,
  `Piece.SIZE_Y`).
- `is_placed` and `position` are read-only properties.
- Two pieces are equal when they have the same position. Pieces are not
  hashable.

### `quassimodo.settings`

This module holds the file paths of models, textures, fonts and buttons.

- `DEFAULTS` maps every known key to its default path, for example
  `"skin.modelos.tablero"` maps to `"conf/skin_default/Tablero.3ds"`.
- `load_settings(path)` reads a configuration file and returns a `Settings`.
  The default path is `DEFAULT_CONFIG_PATH`, which is `"conf/opciones.conf"`.
  Keys the file does not set keep their defaults. A missing file, or
  `path=None`, gives the defaults alone.
- The file is made of `name = value` lines. A `[section]` header prefixes
  the names that follow it with `section.`, and `#` starts a comment. A line
  without `=`, an unknown key or a key given twice raises `BadParameters`.
- `Settings.path(key)` returns the configured path for `key`. It raises
  `BadParameters` for a key that is not known.

```ini
[skin.modelos]
tablero = skins/mine/Board.3ds

[gui.fonts]
default = fonts/small.png   # overrides gui.fonts.default
```

```python
from quassimodo.settings import load_settings

settings = load_settings("conf/opciones.conf")
board_model = settings.path("skin.modelos.tablero")
```

### `quassimodo.options`

`parse_options(argv, config_path)` parses the arguments, without the
program name. When `argv` is `None`, it reads `sys.argv[1:]`. It also loads
the configuration file through `load_settings` and returns an `Options`.

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | ask for help |
| `-t`, `--texto` | text mode (`video_mode` becomes `"NULL"` instead of `"AUTO"`) |
| `-f`, `--fullscreen` | fullscreen |
| `-a`, `--agentes PATH...` | one or more agent paths |
| `-v`, `--velocidad N` | animation speed, an integer, default 250 |

Long options may be shortened to any prefix that names only one option.
Values may follow as separate arguments or be attached (`--velocidad=100`,
`-v100`). Short flags may be combined (`-tf`).

- The parser raises `HelpRequested` when help is asked for or when any
  argument is not recognised. The exception's `text` attribute holds the
  same usage text as `help_text()`.
- It raises `BadParameters` when a value is missing or is not a valid
  integer, when an option is given twice, or when an abbreviation is
  ambiguous. It also raises `BadParameters` for errors in the configuration
  file.
- `Options` has the fields `text_mode`, `fullscreen`, `agents`, `speed` and
  `settings`, and the property `video_mode`.
- `Options.agent_path(num)` returns the `num`-th agent path. It returns
  `""` when no agents were given.

```python
from quassimodo.options import HelpRequested, parse_options

try:
    options = parse_options(["-a", "agents/one.py", "agents/two.py"], "conf/opciones.conf")
except HelpRequested as request:
    print(request.text)
else:
    first_agent = options.agent_path(0)
```

## What the package does not do

The package does not model a full game. It has no board, cells, barriers,
moves, players or agents. It does not check that a move is legal or that a
path to the goal exists, and it does not decide the winner. It has no
command to run, no game loop and no display: it parses options and reads
configuration, and leaves it to the caller to act on them.
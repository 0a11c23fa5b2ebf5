"""Command-line options of the game, combined with the configuration file."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Dict, Optional, Sequence, Tuple, Union

from quassimodo.errors import BadParameters
from quassimodo.settings import DEFAULT_CONFIG_PATH, Settings, load_settings

DEFAULT_SPEED = 250

_HEADER = "Opciones disponibles como argumentos a la aplicación:"


class _Kind(Enum):
    FLAG = "flag"
    INT = "int"
    MULTI = "multi"


@dataclass(frozen=True)
class _Spec:
    name: str
    short: str
    kind: _Kind
    help: str
    metavar: str = ""


_SPECS: Tuple[_Spec, ...] = (
    _Spec("help", "h", _Kind.FLAG, "Muestra mensaje de ayuda."),
    _Spec("texto", "t", _Kind.FLAG, "Inicia la partida en modo de texto."),
    _Spec(
        "fullscreen",
        "f",
        _Kind.FLAG,
        "Inicia la partida en modo fullscreen, se ignora si se usa modo de texto.",
    ),
    _Spec(
        "agentes",
        "a",
        _Kind.MULTI,
        "Especifica el path de los dos agentes a usar.\n"
        "-a /path/a/agente1.py /path/a/agente2.py",
        "arg",
    ),
    _Spec(
        "velocidad",
        "v",
        _Kind.INT,
        "Especifica la velocidad de la animación de los agentes. Default = 250",
        f"arg (={DEFAULT_SPEED})",
    ),
)

_BY_NAME: Dict[str, _Spec] = {spec.name: spec for spec in _SPECS}
_BY_SHORT: Dict[str, _Spec] = {spec.short: spec for spec in _SPECS}


class HelpRequested(Exception):
    """Help was asked for, or the command line held something unrecognised."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


@dataclass(frozen=True)
class Options:
    """What the game was asked to do from the command line, plus its resources."""

    text_mode: bool = False
    fullscreen: bool = False
    agents: Tuple[str, ...] = ()
    speed: int = DEFAULT_SPEED
    settings: Settings = field(default_factory=Settings)

    @property
    def video_mode(self) -> str:
        """``"NULL"`` in text mode, ``"AUTO"`` otherwise."""
        return "NULL" if self.text_mode else "AUTO"

    def agent_path(self, num: int) -> str:
        """The path given for agent ``num``, or ``""`` when no agents were given."""
        if not self.agents:
            return ""
        return self.agents[num]


def help_text() -> str:
    """The description of the command-line options."""
    entries = []
    for spec in _SPECS:
        left = f"  -{spec.short} [ --{spec.name} ]"
        if spec.metavar:
            left += f" {spec.metavar}"
        entries.append((left, spec.help.splitlines()))
    width = max(len(left) for left, _ in entries) + 2
    lines = [_HEADER]
    for left, help_lines in entries:
        first, *rest = help_lines
        lines.append(left.ljust(width) + first)
        lines.extend(" " * width + extra for extra in rest)
    return "\n".join(lines) + "\n"


def _looks_like_option(token: str) -> bool:
    return token.startswith("-") and len(token) > 1


def _lookup_long(name: str) -> Optional[_Spec]:
    if name in _BY_NAME:
        return _BY_NAME[name]
    candidates = [spec for spec in _SPECS if spec.name.startswith(name)] if name else []
    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) > 1:
        names = ", ".join(f"--{spec.name}" for spec in candidates)
        raise BadParameters(f"Option '--{name}' is ambiguous: {names}.")
    return None


def _take_value(
    spec: _Spec, inline: Optional[str], pending: Deque[str]
) -> Union[bool, int, Tuple[str, ...]]:
    if spec.kind is _Kind.FLAG:
        if inline is not None:
            raise BadParameters(f"Option '--{spec.name}' takes no value.")
        return True

    if spec.kind is _Kind.INT:
        if inline is not None:
            text = inline
        elif pending and not _looks_like_option(pending[0]):
            text = pending.popleft()
        else:
            raise BadParameters(f"Option '--{spec.name}' requires a value.")
        try:
            return int(text)
        except ValueError:
            raise BadParameters(
                f"Invalid value {text!r} for option '--{spec.name}'."
            ) from None

    values = [] if inline is None else [inline]
    while pending and not _looks_like_option(pending[0]):
        values.append(pending.popleft())
    if not values:
        raise BadParameters(f"Option '--{spec.name}' requires at least one value.")
    return tuple(values)


def _record(found: dict, spec: _Spec, value: object) -> None:
    if spec.name in found:
        raise BadParameters(f"Option '--{spec.name}' cannot be given more than once.")
    found[spec.name] = value


def _scan(tokens: Sequence[str]) -> Tuple[dict, list]:
    found: dict = {}
    unrecognized: list = []
    pending: Deque[str] = deque(tokens)
    while pending:
        token = pending.popleft()
        if token == "--":
            unrecognized.extend(pending)
            break
        if token.startswith("--"):
            name, sep, inline = token[2:].partition("=")
            spec = _lookup_long(name)
            if spec is None:
                unrecognized.append(token)
                continue
            _record(found, spec, _take_value(spec, inline if sep else None, pending))
        elif _looks_like_option(token):
            body = token[1:]
            for pos, letter in enumerate(body):
                spec = _BY_SHORT.get(letter)
                if spec is None:
                    unrecognized.append(token)
                    break
                if spec.kind is _Kind.FLAG:
                    _record(found, spec, True)
                    continue
                rest = body[pos + 1:] or None
                _record(found, spec, _take_value(spec, rest, pending))
                break
        else:
            unrecognized.append(token)
    return found, unrecognized


def parse_options(
    argv: Optional[Sequence[str]] = None,
    config_path: Optional[Union[str, "os.PathLike[str]"]] = DEFAULT_CONFIG_PATH,
) -> Options:
    """Parse the arguments (without the program name) and read the configuration.

    Raises HelpRequested when help is asked for or when any argument is not
    recognised, and BadParameters when an option's value is missing or invalid.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    found, unrecognized = _scan(tokens)
    settings = load_settings(config_path)

    if found.get("help") or unrecognized:
        raise HelpRequested(help_text())

    return Options(
        text_mode=bool(found.get("texto", False)),
        fullscreen=bool(found.get("fullscreen", False)),
        agents=tuple(found.get("agentes", ())),
        speed=int(found.get("velocidad", DEFAULT_SPEED)),
        settings=settings,
    )
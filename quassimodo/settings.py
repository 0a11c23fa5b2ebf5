"""Paths of the skin and GUI resources, read from the configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from quassimodo.errors import BadParameters

DEFAULT_CONFIG_PATH = "conf/opciones.conf"

DEFAULTS: Mapping[str, str] = MappingProxyType(
    {
        # models
        "skin.modelos.tablero": "conf/skin_default/Tablero.3ds",
        "skin.modelos.jugador_1": "conf/skin_default/Mono.3ds",
        "skin.modelos.jugador_2": "conf/skin_default/MonoBlanco.3ds",
        "skin.modelos.jugador_sombra": "conf/skin_default/MonoSombra.3ds",
        "skin.modelos.antorcha": "conf/skin_default/Lumbrera.3ds",
        "skin.modelos.barrera": "conf/skin_default/Barrera.3ds",
        "skin.modelos.celda": "conf/skin_default/Celda.3ds",
        # textures
        "skin.texturas.tablero": "conf/skin_default/Moss0138_10_S.jpg",
        "skin.texturas.antorcha": "conf/skin_default/fire.bmp",
        "skin.texturas.barrera": "conf/skin_default/BrickOldDirty0078_S.jpg",
        "skin.texturas.celda": "conf/skin_default/Moss0138_2_S.jpg",
        "skin.texturas.terreno": "conf/skin_default/piso3_TX.jpg",
        "skin.texturas.terreno_height": "conf/skin_default/piso3_HM.bmp",
        "skin.texturas.skydome": "conf/skin_default/3.tree.skydome.png",
        # fonts
        "gui.fonts.default": "conf/gui_default/defaultfont2.png",
        "gui.fonts.menu_button": "conf/gui_default/bigfont.png",
        "gui.fonts.tooltip": "conf/gui_default/tooltipfont.png",
        "gui.fonts.buttons": "conf/gui_default/botonFont.png",
        "gui.fonts.window": "conf/gui_default/windowfont.png",
        # buttons
        "gui.botones.vuelta_1": "conf/gui_default/boton4_2-1_vuelta.png",
        "gui.botones.vuelta_1_2": "conf/gui_default/boton4_2-1_vuelta-2.png",
        "gui.botones.vuelta_2": "conf/gui_default/boton4_2-2_vuelta.png",
        "gui.botones.vuelta_2_2": "conf/gui_default/boton4_2-2_vuelta-2.png",
        "gui.botones.vuelta_3": "conf/gui_default/boton5_2-2_vuelta.png",
        "gui.botones.vuelta_3_2": "conf/gui_default/boton5_2-2_vuelta-2.png",
        "gui.botones.frente": "conf/gui_default/boton5_2-1_frente.png",
        "gui.botones.frente_2": "conf/gui_default/boton5_2-1_frente-2.png",
        "gui.botones.pausa_1": "conf/gui_default/boton1_2_pausa.png",
        "gui.botones.pausa_1_2": "conf/gui_default/boton1_2_pausa-2.png",
        "gui.botones.pausa_2": "conf/gui_default/boton2_2_pausa.png",
        "gui.botones.pausa_2_2": "conf/gui_default/boton2_2_pausa-2.png",
        "gui.botones.menu": "conf/gui_default/boton3_2_menu.png",
        "gui.botones.menu_2": "conf/gui_default/boton3_2_menu-2.png",
        # other
        "gui.gui_cfg": "conf/gui_default/boton3_2_menu.png",
        "gui.creditos": "conf/gui_default/creditos1.jpg",
    }
)


@dataclass(frozen=True)
class Settings:
    """Resource paths: the defaults, overridden by the configuration file."""

    values: Mapping[str, str] = field(default_factory=lambda: DEFAULTS)

    def path(self, key: str) -> str:
        """The relative path configured for ``key``, e.g. ``"gui.fonts.default"``."""
        try:
            return self.values[key]
        except KeyError:
            raise BadParameters(f"Unknown configuration option: {key!r}.") from None


def _parse(text: str) -> dict[str, str]:
    found: dict[str, str] = {}
    prefix = ""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip()
            prefix = f"{section}." if section else ""
            continue
        name, sep, value = line.partition("=")
        name = name.strip()
        if not sep or not name:
            raise BadParameters(f"Invalid syntax on line {number}: {raw!r}.")
        key = prefix + name
        if key not in DEFAULTS:
            raise BadParameters(f"Unrecognised option {key!r} on line {number}.")
        if key in found:
            raise BadParameters(f"Option {key!r} is given more than once.")
        found[key] = value.strip()
    return found


def load_settings(
    path: Optional[Union[str, "os.PathLike[str]"]] = DEFAULT_CONFIG_PATH,
) -> Settings:
    """Read the configuration file at ``path``; a missing file leaves the defaults."""
    overrides: dict[str, str] = {}
    if path is not None:
        try:
            with open(path, encoding="utf-8") as handle:
                overrides = _parse(handle.read())
        except FileNotFoundError:
            overrides = {}
    values = dict(DEFAULTS)
    values.update(overrides)
    return Settings(MappingProxyType(values))
import pytest

from quassimodo.errors import BadParameters
from quassimodo.options import HelpRequested, Options, help_text, parse_options


@pytest.fixture
def missing_conf(tmp_path):
    return tmp_path / "absent.conf"


def test_defaults(missing_conf):
    options = parse_options([], missing_conf)
    assert options.video_mode == "AUTO"
    assert options.speed == 250
    assert options.fullscreen is False
    assert options.agent_path(0) == ""


def test_text_mode_gives_null_video(missing_conf):
    assert parse_options(["-t"], missing_conf).video_mode == "NULL"
    assert parse_options(["--texto"], missing_conf).video_mode == "NULL"


def test_fullscreen_flag(missing_conf):
    assert parse_options(["-f"], missing_conf).fullscreen is True
    assert parse_options(["--fullscreen"], missing_conf).fullscreen is True


def test_grouped_short_flags(missing_conf):
    options = parse_options(["-tf"], missing_conf)
    assert options.text_mode is True
    assert options.fullscreen is True


@pytest.mark.parametrize(
    "argv",
    [["-v", "100"], ["--velocidad", "100"], ["--velocidad=100"], ["-v100"]],
)
def test_speed_forms(argv, missing_conf):
    assert parse_options(argv, missing_conf).speed == 100


def test_agents_multitoken(missing_conf):
    options = parse_options(["-a", "one.py", "two.py", "-t"], missing_conf)
    assert options.agents == ("one.py", "two.py")
    assert options.agent_path(0) == "one.py"
    assert options.agent_path(1) == "two.py"
    assert options.text_mode is True


def test_agent_path_out_of_range(missing_conf):
    options = parse_options(["-a", "one.py"], missing_conf)
    with pytest.raises(IndexError):
        options.agent_path(1)


def test_help_requested(missing_conf):
    with pytest.raises(HelpRequested) as info:
        parse_options(["-h"], missing_conf)
    assert info.value.text == help_text()


@pytest.mark.parametrize("argv", [["--unknown"], ["positional"], ["-x"]])
def test_unrecognized_requests_help(argv, missing_conf):
    with pytest.raises(HelpRequested):
        parse_options(argv, missing_conf)


def test_invalid_speed(missing_conf):
    with pytest.raises(BadParameters):
        parse_options(["-v", "fast"], missing_conf)


def test_missing_speed_value(missing_conf):
    with pytest.raises(BadParameters):
        parse_options(["-v"], missing_conf)


def test_agents_need_a_value(missing_conf):
    with pytest.raises(BadParameters):
        parse_options(["-a", "-t"], missing_conf)


def test_repeated_option(missing_conf):
    with pytest.raises(BadParameters):
        parse_options(["-v", "1", "-v", "2"], missing_conf)


def test_long_prefix_is_accepted(missing_conf):
    assert parse_options(["--vel", "42"], missing_conf).speed == 42


def test_config_file_overrides(tmp_path):
    conf = tmp_path / "opciones.conf"
    conf.write_text("[gui.fonts]\ndefault = mine.png\n", encoding="utf-8")
    options = parse_options([], conf)
    assert options.settings.path("gui.fonts.default") == "mine.png"
    assert options.settings.path("gui.creditos") == "conf/gui_default/creditos1.jpg"


def test_missing_config_uses_defaults(missing_conf):
    options = parse_options([], missing_conf)
    assert options.settings.path("skin.modelos.tablero") == "conf/skin_default/Tablero.3ds"


def test_help_text_lists_every_option():
    text = help_text()
    for name in ("--help", "--texto", "--fullscreen", "--agentes", "--velocidad"):
        assert name in text
    assert text.startswith("Opciones disponibles como argumentos a la aplicación:")


def test_options_direct_construction():
    options = Options(text_mode=True, agents=("x.py",))
    assert options.video_mode == "NULL"
    assert options.agent_path(0) == "x.py"
from pathlib import Path

import pytest

from focus_window.__main__ import EXECUTABLES, PROGRAMS, main, program_module, program_name
from focus_window.utils.version import get_version


ROOT = Path(__file__).resolve().parent.parent.parent


@pytest.mark.parametrize('path', EXECUTABLES)
def test_executables_exist(path):
    script = ROOT / path
    assert script.exists()
    assert '__main__' in script.read_text()


def test_executable_names():
    assert program_name("focus_window/utils/replay_scenario.py") == "replay_scenario"
    assert program_module("focus_window/utils/replay_scenario.py") == \
        "focus_window.utils.replay_scenario"
    assert PROGRAMS == {"replay_scenario": "focus_window.utils.replay_scenario",
                        "version": "focus_window.utils.version"}


def test_help(capsys):
    assert main(['--help']) == 0
    assert 'Run a focus_window tool.' in capsys.readouterr().out


def test_no_program(capsys):
    assert main([]) == 1
    assert 'usage:' in capsys.readouterr().out


def test_unknown_program(capsys):
    with pytest.raises(SystemExit):
        main(['no_such_tool'])


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--version'])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == get_version()


def test_run_program(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['version'])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() != ''

import copy

import pytest

import config
import main
from run_regime_sweep import DAMPING_CASES, build_commands


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in ('SYSTEM_PARAMS', 'SOLVER_CONFIG', 'SCENE_CONFIG', 'SIMULATION_PARAMS'):
        monkeypatch.setattr(config, name, copy.deepcopy(getattr(config, name)))


def test_overrides_are_applied():
    main.parse_overrides(['--c', '1.5', '--M', '3', '--method', 'BDF', '--binding', 'position',
                          '--num_frames', '7', '--headless', '--no_plots'])
    assert config.SYSTEM_PARAMS['c'] == 1.5
    assert config.SYSTEM_PARAMS['M'] == 3.0
    assert config.SYSTEM_PARAMS['k'] == 2.0
    assert config.SOLVER_CONFIG['method'] == 'BDF'
    assert config.SCENE_CONFIG['binding'] == 'position'
    assert config.SIMULATION_PARAMS['num_frames'] == 7
    assert config.SIMULATION_PARAMS['headless']
    assert not config.SIMULATION_PARAMS['show_plots']


def test_headless_run(capsys):
    results = main.main(['--headless', '--no_plots', '--num_frames', '5'])
    assert len(results['time_points']) == 6
    assert 'Integration Summary' in capsys.readouterr().out


def test_invalid_mass_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(['--M', '0', '--headless'])
    assert excinfo.value.code == 1
    assert '[ERROR Configuration]' in capsys.readouterr().out


def test_invalid_binding_exits():
    with pytest.raises(SystemExit):
        main.main(['--binding', 'acceleration', '--headless'])


def test_window_without_interactive_backend_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(['--num_frames', '1'])
    assert excinfo.value.code == 1
    assert '[ERROR Display]' in capsys.readouterr().out


def test_regime_commands():
    commands = build_commands()
    assert len(commands) == len(DAMPING_CASES) * 2
    for command in commands:
        assert command[1] == 'main.py'
        assert '--headless' in command and '--no_plots' in command

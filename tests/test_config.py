import pytest

from rowedit.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_stop == 8
    assert config.quit_times == 3
    assert config.status_timeout == 5.0


def test_from_env_overrides() -> None:
    config = EditorConfig.from_env(
        {
            "ROWEDIT_TAB_STOP": "4",
            "ROWEDIT_QUIT_TIMES": "0",
            "ROWEDIT_STATUS_TIMEOUT": "2.5",
        }
    )

    assert config == EditorConfig(tab_stop=4, quit_times=0, status_timeout=2.5)


def test_from_env_ignores_invalid_values() -> None:
    config = EditorConfig.from_env(
        {
            "ROWEDIT_TAB_STOP": "0",
            "ROWEDIT_QUIT_TIMES": "many",
            "ROWEDIT_STATUS_TIMEOUT": "soon",
        }
    )

    assert config == EditorConfig()


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("ROWEDIT_TAB_STOP", "2")

    assert EditorConfig.from_env().tab_stop == 2


@pytest.mark.parametrize("kwargs", [{"tab_stop": 0}, {"quit_times": -1}])
def test_invalid_config_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**kwargs)

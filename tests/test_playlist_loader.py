import random

import pytest

from playlist_loader import Act, ConfigError, load_playlist
from timing import TICK_HZ

FULL = """
persons: [Alice, Bob, Carol]
random: false
acts:
  - name: Intro
    time: 30s
  - name: Talk
    time: 4m30s
counter: true
next: true
"""


def test_loads_full_document(write_yaml):
    pl = load_playlist(write_yaml(FULL))

    assert pl.persons == ["Alice", "Bob", "Carol"]
    assert pl.acts == (
        Act("Intro", 30 * TICK_HZ, "30s"),
        Act("Talk", 270 * TICK_HZ, "4m30s"),
    )
    assert pl.counter is True
    assert pl.show_next is True
    assert pl.random is False


def test_missing_keys_default_to_empty(write_yaml):
    pl = load_playlist(write_yaml("counter: true\n"))
    assert pl.persons == []
    assert pl.acts == ()
    assert pl.show_next is False


def test_empty_file_is_empty_playlist(write_yaml):
    pl = load_playlist(write_yaml(""))
    assert pl.persons == [] and pl.acts == ()


def test_persons_are_coerced_to_strings(write_yaml):
    pl = load_playlist(write_yaml("persons: [1, two, 3.5]\nacts: []\n"))
    assert pl.persons == ["1", "two", "3.5"]


def test_random_shuffles_once_with_given_rng(write_yaml):
    names = [f"p{i}" for i in range(10)]
    path = write_yaml(
        "random: true\npersons: [" + ", ".join(names) + "]\n"
        "acts: [{name: a, time: 1s}]\n"
    )
    expected = list(names)
    random.Random(42).shuffle(expected)

    pl = load_playlist(path, rng=random.Random(42))
    assert pl.persons == expected
    assert sorted(pl.persons) == sorted(names)


def test_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError, match="failed to read file"):
        load_playlist(str(tmp_path / "nope.yaml"))


def test_malformed_yaml_is_config_error(write_yaml):
    with pytest.raises(ConfigError, match="failed to parse yaml"):
        load_playlist(write_yaml("persons: [Alice, Bob\nacts: {"))


def test_top_level_must_be_mapping(write_yaml):
    with pytest.raises(ConfigError, match="mapping"):
        load_playlist(write_yaml("- Alice\n- Bob\n"))


def test_bad_durations_are_all_reported(write_yaml):
    path = write_yaml("""
persons: [A]
acts:
  - {name: ok, time: 10s}
  - {name: typo, time: 10 sec}
  - {name: bare, time: 90}
  - {name: missing}
""")
    with pytest.raises(ConfigError) as exc:
        load_playlist(path)

    msg = str(exc.value)
    assert "'typo'" in msg and "'10 sec'" in msg
    assert "'bare'" in msg and "'90'" in msg
    assert "'missing'" in msg
    assert "'ok'" not in msg


def test_act_must_be_mapping(write_yaml):
    with pytest.raises(ConfigError, match="act #1"):
        load_playlist(write_yaml("persons: [A]\nacts: [just-a-string]\n"))

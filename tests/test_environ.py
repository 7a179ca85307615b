import pytest

from minish.environ import (
    EnvError,
    add_var,
    find_line,
    key_of,
    remove_at,
    set_value,
    set_value_at,
    value_of,
    value_part,
)


@pytest.fixture
def env():
    return ["HOME=/home/user", "PATH=/bin:/usr/bin", "SHLVL=1", "NOEQUALS"]


def test_key_of_splits_at_first_equals():
    assert key_of("HOME=/home/user") == "HOME"
    assert key_of("A=b=c") == "A"


def test_key_of_without_equals_is_none():
    assert key_of("NOEQUALS") is None
    assert key_of(None) is None


def test_value_part_keeps_later_equals():
    assert value_part("A=b=c") == "b=c"
    assert value_part("EMPTY=") == ""
    assert value_part("NOEQUALS") is None


def test_find_line_returns_index(env):
    assert find_line(env, "PATH") == env.index("PATH=/bin:/usr/bin")
    assert find_line(env, "HOME") == env.index("HOME=/home/user")


def test_find_line_missing_is_none(env):
    assert find_line(env, "MISSING") is None


def test_find_line_skips_entries_without_equals(env):
    assert find_line(env, "NOEQUALS") is None


def test_find_line_matches_key_prefix():
    env = ["PATHX=1", "PATH=2"]
    assert find_line(env, "PATH") == 0


def test_value_of(env):
    assert value_of(env, "PATH") == "/bin:/usr/bin"
    assert value_of(env, "MISSING") is None


def test_set_value_replaces_only_that_entry(env):
    updated = set_value(env, "HOME", "/tmp")
    assert value_of(updated, "HOME") == "/tmp"
    assert len(updated) == len(env)
    assert updated[1:] == env[1:]


def test_set_value_leaves_original_untouched(env):
    original = list(env)
    set_value(env, "SHLVL", "2")
    assert env == original


def test_set_value_missing_key_raises(env):
    with pytest.raises(EnvError):
        set_value(env, "MISSING", "x")


def test_set_value_at_round_trip(env):
    index = find_line(env, "SHLVL")
    updated = set_value_at(env, index, "5")
    assert updated[index] == "SHLVL=5"


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_set_value_at_out_of_range_raises(env, index):
    with pytest.raises(EnvError):
        set_value_at(env, index, "x")


def test_set_value_at_entry_without_key_raises(env):
    with pytest.raises(EnvError):
        set_value_at(env, env.index("NOEQUALS"), "x")


def test_add_var_appends(env):
    updated = add_var(env, "NEW=value")
    assert updated[-1] == "NEW=value"
    assert updated[:-1] == env
    assert value_of(updated, "NEW") == "value"


def test_remove_at_drops_entry(env):
    index = find_line(env, "PATH")
    updated = remove_at(env, index)
    assert len(updated) == len(env) - 1
    assert find_line(updated, "PATH") is None
    assert "PATH=/bin:/usr/bin" in env


def test_remove_at_out_of_range_raises(env):
    with pytest.raises(EnvError):
        remove_at(env, len(env))
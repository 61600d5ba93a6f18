import pytest

from ralgeb import InvalidArgumentError, LibraryConfig, get_config, reset_config, set_config


def test_defaults_keep_legacy_behaviour():
    config = get_config()

    assert config.strict_combinatorics is False
    assert config.column_padding == 'cols'


def test_get_config_returns_a_copy():
    config = get_config()
    config.strict_combinatorics = True

    assert get_config().strict_combinatorics is False


def test_set_config_stores_a_copy():
    config = LibraryConfig(column_padding='rows')
    set_config(config)
    config.column_padding = 'cols'

    assert get_config().column_padding == 'rows'


def test_set_config_rejects_unknown_padding():
    with pytest.raises(InvalidArgumentError) as exc:
        set_config(LibraryConfig(column_padding='diagonal'))

    assert 'column_padding' in str(exc.value)
    assert get_config().column_padding == 'cols'


def test_reset_config():
    set_config(LibraryConfig(strict_combinatorics=True, column_padding='rows'))
    reset_config()

    assert get_config() == LibraryConfig()

"""Unit tests for the configuration context."""

from src.bookstore.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    PaginationConfig,
)
from src.bookstore.runtime.context import (
    AppContext,
    get_config,
    get_context,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_override_applies_only_inside_block(self):
        original = get_config()

        with with_context(ConfigData(pagination=PaginationConfig(max_page_size=5))):
            assert get_config().pagination.max_page_size == 5
            assert get_config() is not original

        assert get_config() is original

    def test_unset_fields_are_inherited(self):
        original = get_config()

        with with_context(ConfigData(pagination=PaginationConfig(max_page_size=5))):
            assert get_config().jwt.secret == original.jwt.secret
            assert get_config().pagination.default_page_size == (
                original.pagination.default_page_size
            )

    def test_nested_overrides(self):
        original_level = get_config().logging.level
        level1 = ConfigData()
        level1.app.port = 8001

        with with_context(level1):
            level2 = ConfigData()
            level2.logging.level = "DEBUG"

            with with_context(level2):
                assert get_config().app.port == 8001
                assert get_config().logging.level == "DEBUG"

            assert get_config().logging.level == original_level
            assert get_config().app.port == 8001

    def test_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_computed_fields_recomputed(self):
        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            assert get_config().database.connection_string == "sqlite://"

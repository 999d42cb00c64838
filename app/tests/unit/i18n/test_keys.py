"""Tests for swiftbase.i18n.keys module."""

from unittest.mock import MagicMock, patch

import pytest

from swiftbase.i18n import FormattedMessage, MessageKey, UserContext
from tests.factories.i18n import Goodbye, Welcome


class TestFormattedMessage:
    """Tests for FormattedMessage display form."""

    def test_str_returns_text(self):
        """str() yields the message text."""
        assert str(FormattedMessage("Hello")) == "Hello"

    def test_defaults_to_untranslated(self):
        """translated defaults to False."""
        assert FormattedMessage("Hello").translated is False

    def test_is_immutable(self):
        """FormattedMessage is frozen."""
        message = FormattedMessage("Hello")
        with pytest.raises(AttributeError):
            message.text = "Bye"


class TestMessageKeyIdentity:
    """Tests for structural identity of message keys."""

    def test_same_variant_instances_are_equal(self):
        """Two instances of one variant compare and hash equal."""
        assert Welcome() == Welcome()
        assert hash(Welcome()) == hash(Welcome())

    def test_distinct_variants_are_not_equal(self):
        """Different variants never compare equal."""
        assert Welcome() != Goodbye()

    def test_usable_as_mapping_key(self):
        """A fresh instance finds the entry stored under another instance."""
        templates = {Welcome(): "Hello"}
        assert templates[Welcome()] == "Hello"

    def test_not_equal_to_other_types(self):
        """Keys do not compare equal to their identifier string."""
        assert Welcome() != "welcome"

    def test_repr_names_variant(self):
        """repr() shows the variant name."""
        assert repr(Welcome()) == "Welcome()"


class TestMessageKeyCapabilities:
    """Tests for raw identifier, display form, logging and resolution."""

    def test_raw_is_lowercase_type_name(self):
        """raw() returns the lower-cased class name."""
        assert Welcome().raw() == "welcome"

    def test_default_display_wraps_raw_identifier(self):
        """default_display() wraps the raw identifier, untranslated."""
        assert Goodbye().default_display() == FormattedMessage("goodbye", False)

    @pytest.mark.parametrize(
        "level,method",
        [
            ("INFO", "info"),
            ("info", "info"),
            ("WARN", "warning"),
            ("ERROR", "error"),
            ("error", "error"),
            ("TRACE", "debug"),
            ("WARNING", "debug"),
            ("", "debug"),
        ],
    )
    def test_log_dispatches_on_level(self, level, method):
        """log() writes the raw identifier at the matching severity."""
        with patch("swiftbase.i18n.keys.logger") as mock_logger:
            Welcome().log(level)

        getattr(mock_logger, method).assert_called_once_with("welcome")

    def test_log_defaults_to_info(self):
        """log() without a level writes at INFO."""
        with patch("swiftbase.i18n.keys.logger") as mock_logger:
            Welcome().log()

        mock_logger.info.assert_called_once_with("welcome")
        mock_logger.debug.assert_not_called()

    def test_resolve_for_delegates_to_resolver(self):
        """resolve_for() passes itself and the arguments to the resolver."""
        resolver = MagicMock()
        context = UserContext("en")

        result = Welcome().resolve_for(context, resolver, "Ann")

        resolver.resolve.assert_called_once_with(context, Welcome(), "Ann")
        assert result is resolver.resolve.return_value

    def test_base_class_is_a_message_key(self):
        """Variants are MessageKey instances."""
        assert isinstance(Welcome(), MessageKey)

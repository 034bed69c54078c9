"""Unit tests for logfire export selection."""

import pytest

from unihub.config import ObservabilitySettings, Settings
from unihub.util.observability import should_send_to_logfire


class TestShouldSendToLogfire:
    """Tests for should_send_to_logfire."""

    @pytest.mark.parametrize(
        "token, flag, expected",
        [
            (None, None, False),
            ("tok", None, True),
            ("tok", False, False),
            (None, True, True),
        ],
    )
    def test_flag_overrides_token(self, token, flag, expected):
        settings = Settings(
            observability=ObservabilitySettings(logfire_token=token, send_to_logfire=flag)
        )

        assert should_send_to_logfire(settings) is expected

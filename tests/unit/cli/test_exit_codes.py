"""Tests for cli/exit_codes.py module."""

from localhistory.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        """GENERAL_ERROR should be 1."""
        assert ExitCode.GENERAL_ERROR == 1

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        assert 10 <= ExitCode.INVALID_ARGUMENT <= 19
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 20 <= ExitCode.NOT_SUB_PATH <= 29

    def test_no_clash_with_click_usage_error(self) -> None:
        """Click uses exit code 2 for usage errors."""
        assert 2 not in {int(code) for code in ExitCode}

"""Tests for branchnote.rule.skip module."""

import shutil
import subprocess
from unittest.mock import MagicMock

import pytest

from branchnote.rule import (
    CommandPredicate,
    RuleConfig,
    build_predicate,
    evaluate_skip,
)
from branchnote.rule.skip import COMMAND_NOT_RUN

from conftest import FakePredicate

requires_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not available")


class TestCommandPredicate:
    """Tests for CommandPredicate class."""

    def test_returns_exit_code(self, mocker):
        """Test that the command's exit status is returned."""
        mock_result = MagicMock()
        mock_result.returncode = 3
        mock_run = mocker.patch("subprocess.run", return_value=mock_result)

        assert CommandPredicate(["check", "--quiet"]).run() == 3

        args, kwargs = mock_run.call_args
        assert args[0] == ["check", "--quiet"]
        assert kwargs["stdin"] is subprocess.DEVNULL
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL

    def test_missing_command(self, mocker):
        """Test that a command that cannot start reports failure."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        assert CommandPredicate(["no-such-command"]).run() == COMMAND_NOT_RUN

    @requires_bash
    def test_real_commands(self):
        """Test with real processes."""
        assert CommandPredicate(["bash", "-c", "exit 0"]).run() == 0
        assert CommandPredicate(["bash", "-c", "exit 1"]).run() == 1


class TestBuildPredicate:
    """Tests for build_predicate function."""

    def test_none_when_not_configured(self):
        """Test that no predicate is built without skip_if."""
        assert build_predicate(None) is None
        assert build_predicate([]) is None

    def test_command_predicate(self):
        """Test that skip_if becomes a CommandPredicate."""
        predicate = build_predicate(["bash", "-c", "exit 0"])
        assert isinstance(predicate, CommandPredicate)
        assert predicate.argv == ["bash", "-c", "exit 0"]


class TestEvaluateSkip:
    """Tests for evaluate_skip function."""

    PATTERN = "(123)-topic"

    def _config(self, skip_on_match):
        return RuleConfig(
            branch_pattern=self.PATTERN,
            skip_if_pattern_matches_commit_message=skip_on_match,
        )

    @pytest.mark.parametrize("exit_code", [0, 1])
    def test_message_match_skips_when_enabled(self, exit_code):
        """Test that a matching message skips whatever the predicate says."""
        decision = evaluate_skip(self._config(True), "123-topic this is a commit\n", FakePredicate(exit_code))
        assert decision.skip
        assert decision.message_already_matches

    def test_message_match_ignored_when_disabled(self):
        """Test that a matching message alone does not skip when disabled."""
        decision = evaluate_skip(self._config(False), "123-topic this is a commit\n", FakePredicate(1))
        assert not decision.skip
        assert decision.message_already_matches

    def test_predicate_success_skips(self):
        """Test that a zero exit status skips."""
        decision = evaluate_skip(self._config(False), "789-topic this is a commit\n", FakePredicate(0))
        assert decision.skip
        assert decision.predicate_ok

    def test_predicate_failure_rewrites(self):
        """Test that a non-zero exit status does not skip."""
        decision = evaluate_skip(self._config(True), "789-topic this is a commit\n", FakePredicate(1))
        assert not decision.skip
        assert not decision.predicate_ok

    def test_no_predicate(self):
        """Test that a missing predicate counts as not satisfied."""
        decision = evaluate_skip(self._config(True), "no match here\n", None)
        assert not decision.skip
        assert not decision.predicate_ok

    def test_predicate_always_invoked(self):
        """Test that the predicate runs even when the message match decides."""
        predicate = FakePredicate(1)
        evaluate_skip(self._config(True), "123-topic this is a commit\n", predicate)
        assert predicate.calls == 1

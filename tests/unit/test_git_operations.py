"""Tests for the git plumbing."""

from pathlib import Path

import pytest

from gopages.errors import GitCommandError
from gopages.git.operations import GitOperations


def _recording_runner(calls, status=""):
    async def runner(args, cwd):
        calls.append((list(args), Path(cwd)))
        if args == ["git", "status", "--porcelain"]:
            return status
        return ""
    return runner


@pytest.mark.asyncio
class TestGitOperations:
    async def test_setup_account_sets_fixed_identity(self, tmp_path):
        calls = []
        git = GitOperations(tmp_path, runner=_recording_runner(calls))
        await git.setup_account()
        assert [c[0] for c in calls] == [
            ["git", "config", "user.name", "GitHub Action"],
            ["git", "config", "user.email", "action@github.com"],
        ]
        assert calls[0][1] == tmp_path

    async def test_switch_new_branch(self, tmp_path):
        calls = []
        git = GitOperations(tmp_path, runner=_recording_runner(calls))
        await git.switch_new_branch("update-redirect-files-1")
        assert calls[0][0] == ["git", "checkout", "-b", "update-redirect-files-1"]

    async def test_commit_all_changes_stages_then_commits(self, tmp_path):
        calls = []
        git = GitOperations(tmp_path, runner=_recording_runner(calls))
        await git.commit_all_changes("Update redirect files")
        assert calls[0][0] == ["git", "add", "."]
        assert calls[1][0] == ["git", "commit", "-m", "Update redirect files"]

    async def test_push_changes(self, tmp_path):
        calls = []
        git = GitOperations(tmp_path, runner=_recording_runner(calls))
        await git.push_changes()
        assert calls[0][0] == ["git", "push", "origin", "HEAD"]

    async def test_check_diff_dirty(self, tmp_path):
        git = GitOperations(tmp_path, runner=_recording_runner([], status="?? m/index.html\n"))
        assert await git.check_diff() is True

    async def test_check_diff_clean(self, tmp_path):
        git = GitOperations(tmp_path, runner=_recording_runner([], status="\n"))
        assert await git.check_diff() is False

    async def test_runner_error_propagates(self, tmp_path):
        async def failing(args, cwd):
            raise GitCommandError(list(args), 128, "fatal: not a git repository")

        git = GitOperations(tmp_path, runner=failing)
        with pytest.raises(GitCommandError) as exc_info:
            await git.push_changes()
        assert exc_info.value.returncode == 128


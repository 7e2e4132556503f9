"""Shared test configuration and fixtures for GoPages test suite."""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from gopages.github.models import PullRequest, Repository  # noqa: E402
from gopages.models.payload import GoModInfo, Payload  # noqa: E402


@pytest.fixture(scope="session")
def project_root():
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def schemas_dir(project_root):
    return project_root / "schemas"


# ──────────────────────────────────────────────────────────
# Recording fakes for the service ports
# ──────────────────────────────────────────────────────────

class _Recorder:
    """Appends (method, args) to a shared call log; raises configured errors."""

    def __init__(self, log: list, errors: dict[str, Exception] | None = None):
        self.log = log
        self.errors = errors or {}

    def _call(self, name: str, *args):
        self.log.append((name, args))
        if name in self.errors:
            raise self.errors[name]

    def calls(self, name: str) -> list[tuple]:
        return [args for called, args in self.log if called == name]


class FakeEnv(_Recorder):
    def __init__(self, log, slug="current-owner/current-repo"):
        super().__init__(log)
        self.slug = slug

    def get_github_repository(self):
        self._call("get_github_repository")
        return self.slug


class FakeFs(_Recorder):
    def __init__(self, log, errors=None):
        super().__init__(log, errors)
        self.files: dict[str, str] = {}

    async def save_file(self, file_path, content):
        self._call("save_file", file_path)
        self.files[file_path] = content


class FakeGit(_Recorder):
    def __init__(self, log, has_changes=True, errors=None):
        super().__init__(log, errors)
        self.has_changes = has_changes

    async def setup_account(self):
        self._call("setup_account")

    async def switch_new_branch(self, branch_name):
        self._call("switch_new_branch", branch_name)

    async def commit_all_changes(self, message):
        self._call("commit_all_changes", message)

    async def push_changes(self):
        self._call("push_changes")

    async def check_diff(self):
        self._call("check_diff")
        return self.has_changes


class FakeGitHub(_Recorder):
    def __init__(self, log, default_branch="main", errors=None):
        super().__init__(log, errors)
        self.default_branch = default_branch

    async def get_repository(self, owner, repo):
        self._call("get_repository", owner, repo)
        return Repository(owner=owner, repo=repo, default_branch=self.default_branch)

    async def create_pull_request(self, params):
        self._call("create_pull_request", params)
        return PullRequest(number=7, html_url=f"https://github.com/{params.owner}/{params.repo}/pull/7")

    async def create_issue_comment(self, params):
        self._call("create_issue_comment", params)


class FakeGo(_Recorder):
    def __init__(self, log, mod_info, exists=True):
        super().__init__(log)
        self.mod_info = mod_info
        self.exists = exists

    async def check_existence(self):
        self._call("check_existence")
        return self.exists

    async def get_mod_info(self):
        self._call("get_mod_info")
        return self.mod_info


GIT_CALLS = ("setup_account", "switch_new_branch", "commit_all_changes", "push_changes")
GITHUB_CALLS = ("get_repository", "create_pull_request")


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def ports(call_log):
    return SimpleNamespace(
        log=call_log,
        env=FakeEnv(call_log),
        fs=FakeFs(call_log),
        git=FakeGit(call_log),
        github=FakeGitHub(call_log),
    )


@pytest.fixture
def fakes():
    """Fake classes, for tests that need custom construction."""
    return SimpleNamespace(
        FakeEnv=FakeEnv, FakeFs=FakeFs, FakeGit=FakeGit, FakeGitHub=FakeGitHub, FakeGo=FakeGo,
        GIT_CALLS=GIT_CALLS, GITHUB_CALLS=GITHUB_CALLS,
    )


@pytest.fixture
def go_mod_info():
    return GoModInfo(
        module={"path": "example.com/test-module"},
        imports=[
            "example.com/test-module/pkg1",
            "example.com/test-module/pkg2",
            "other.com/external",
        ],
    )


@pytest.fixture
def payload(go_mod_info):
    return Payload(owner="test-owner", repo_name="test-repo", go_mod_info=go_mod_info)

"""Unit tests for environment access."""

import pytest

from gopages.env.environment import EnvironmentReader, split_repository_slug
from gopages.errors import ConfigurationError


class TestEnvironmentReader:
    def test_reads_slug(self):
        env = EnvironmentReader({"GITHUB_REPOSITORY": "owner/repo"})
        assert env.get_github_repository() == "owner/repo"

    def test_missing(self):
        assert EnvironmentReader({}).get_github_repository() is None

    def test_empty_is_missing(self):
        assert EnvironmentReader({"GITHUB_REPOSITORY": ""}).get_github_repository() is None

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_REPOSITORY", "from/process")
        assert EnvironmentReader().get_github_repository() == "from/process"


class TestSplitRepositorySlug:
    def test_valid(self):
        assert split_repository_slug("owner/repo") == ("owner", "repo")

    @pytest.mark.parametrize("slug", ["owner", "owner/", "/repo", "a/b/c", ""])
    def test_invalid(self, slug):
        with pytest.raises(ConfigurationError):
            split_repository_slug(slug)

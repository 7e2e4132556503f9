"""GoPages — GitHub REST request/response shapes used by the services."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Repository(BaseModel):
    owner: str
    repo: str
    default_branch: str


class CreatePullRequestParams(BaseModel):
    owner: str
    repo: str
    title: str
    head: str
    base: str


class PullRequest(BaseModel):
    number: int
    html_url: str = ""


class CreateIssueCommentParams(BaseModel):
    owner: str
    repo_name: str
    issue_number: int = Field(gt=0)
    comment: str

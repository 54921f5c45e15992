#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest configuration and fixtures for git-tag-remover tests.
"""

import os
import shutil
import subprocess
import sys

import pytest

from git_tag_remover.errors import GitCommandError
from git_tag_remover.interactive import InteractiveHandler

MARKERS = {
    "unit": "Unit tests that don't require external dependencies",
    "integration": "Integration tests that run git against a temporary repository",
    "cli": "Tests that exercise the CLI interface",
}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    for marker, description in MARKERS.items():
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file names."""
    for item in items:
        if "test_main_cli" in item.nodeid or "test_dry_run" in item.nodeid:
            item.add_marker(pytest.mark.cli)
        elif "git_repo" in getattr(item, "fixturenames", ()):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


class ScriptedPrompter(InteractiveHandler):
    """Prompter that replays canned answers and records every question."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def ask(self, question, choices):
        self.questions.append((question, choices))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question}")
        answer = self.answers.pop(0)
        values = [value for _, value in choices]
        if answer is not None and answer not in values:
            raise AssertionError(f"Answer {answer!r} is not one of {values}")
        return answer


class FakeBackend:
    """In-memory stand-in for GitBackend.

    ``failures`` maps "remote:<tag>" or "local:<tag>" to the number of
    times that step fails before succeeding (-1 fails forever).
    """

    def __init__(self, tags=(), failures=None, remote="origin", unavailable=None):
        self.tags = list(tags)
        self.remote_tags = set(self.tags)
        self.local_tags = set(self.tags)
        self.failures = dict(failures or {})
        self.remote = remote
        self.unavailable = unavailable
        self.calls = []

    def list_tags(self, tag_filter=None):
        from git_tag_remover.errors import BackendUnavailable

        if self.unavailable:
            raise BackendUnavailable(self.unavailable)
        return [tag for tag in self.tags if not tag_filter or tag_filter in tag]

    def _maybe_fail(self, key):
        remaining = self.failures.get(key, 0)
        if remaining:
            if remaining > 0:
                self.failures[key] = remaining - 1
            raise GitCommandError(f"simulated failure for {key}", stderr=f"simulated failure for {key}")

    def delete_remote_tag(self, tag):
        self.calls.append(("remote", tag))
        self._maybe_fail(f"remote:{tag}")
        if tag not in self.remote_tags:
            return False
        self.remote_tags.discard(tag)
        return True

    def delete_local_tag(self, tag):
        self.calls.append(("local", tag))
        self._maybe_fail(f"local:{tag}")
        if tag not in self.local_tags:
            return False
        self.local_tags.discard(tag)
        return True


@pytest.fixture
def scripted_prompter():
    """Factory for prompters answering from a fixed script."""
    return ScriptedPrompter


@pytest.fixture
def fake_backend():
    """Factory for in-memory git backends."""
    return FakeBackend


def git(*args, cwd):
    """Run git in a directory and return stdout, failing the test on error."""
    env = os.environ.copy()
    env.update({
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
        "GIT_CONFIG_NOSYSTEM": "1",
    })
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, env=env
    )
    assert result.returncode == 0, f"git {' '.join(args)} failed: {result.stderr}"
    return result.stdout


class GitRepo:
    """A working repository with a bare 'origin' remote."""

    def __init__(self, root):
        self.path = str(root / "work")
        self.origin = str(root / "origin.git")
        os.makedirs(self.path)
        git("init", "-q", "--bare", self.origin, cwd=str(root))
        git("init", "-q", cwd=self.path)
        git("config", "commit.gpgsign", "false", cwd=self.path)
        git("config", "tag.gpgsign", "false", cwd=self.path)
        git("commit", "-q", "--allow-empty", "-m", "initial", cwd=self.path)
        git("remote", "add", "origin", self.origin, cwd=self.path)

    def create_tags(self, *tags, push=True):
        for tag in tags:
            git("tag", tag, cwd=self.path)
        if push and tags:
            git("push", "-q", "origin", *[f"refs/tags/{tag}" for tag in tags], cwd=self.path)

    def local_tags(self):
        return [line for line in git("tag", "-l", cwd=self.path).splitlines() if line]

    def remote_tags(self):
        output = git("ls-remote", "--tags", "origin", cwd=self.path)
        return [line.split("refs/tags/", 1)[1] for line in output.splitlines() if "refs/tags/" in line]


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary repository with a bare origin remote."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return GitRepo(tmp_path)


def run_tag_remover_command(args, cwd=None, env=None):
    """Run the git-tag-remover CLI in a subprocess and return the output."""
    result = subprocess.run(
        [sys.executable, "-m", "git_tag_remover.main", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )
    return result.stdout, result.stderr, result.returncode


@pytest.fixture
def run_cli():
    """Expose the subprocess CLI runner to tests."""
    return run_tag_remover_command

"""Tests for the git command-line adapter."""

from pathlib import Path

import pytest

from recharge.adapters.vcs import GitCLIAdapter

from ..fakes import FakeCommandRunner

REPO = Path("/srv/site")
WORKSPACE = REPO / "gh-pages"


@pytest.fixture
def runner():
    return FakeCommandRunner()


@pytest.fixture
def git(runner):
    return GitCLIAdapter(runner=runner, repo_root=REPO)


def last_call(runner):
    return runner.calls[-1]


def test_remove_worktree_is_forced_and_quiet(git, runner):
    git.remove_worktree(WORKSPACE)
    assert last_call(runner) == (
        ("git", "worktree", "remove", str(WORKSPACE), "--force"),
        REPO,
        True,
    )


def test_prune_runs_in_repo_root(git, runner):
    git.prune_worktrees()
    assert last_call(runner)[0] == ("git", "worktree", "prune")
    assert last_call(runner)[1] == REPO


def test_remote_branch_exists_when_ls_remote_prints_a_head(git, runner):
    argv = ("git", "ls-remote", "--heads", "origin", "gh-pages")
    runner.outputs[argv] = "3f2a9c\trefs/heads/gh-pages\n"

    assert git.remote_branch_exists("origin", "gh-pages") is True


def test_remote_branch_missing_when_output_empty(git, runner):
    assert git.remote_branch_exists("origin", "gh-pages") is False


def test_remote_branch_query_failure_means_missing(runner):
    argv = ("git", "ls-remote", "--heads", "origin", "gh-pages")
    runner.returncodes[argv] = 128
    runner.outputs[argv] = "3f2a9c\trefs/heads/gh-pages\n"
    git = GitCLIAdapter(runner=runner, repo_root=REPO)

    assert git.remote_branch_exists("origin", "gh-pages") is False


def test_fetch_updates_local_branch_of_same_name(git, runner):
    git.fetch_branch("origin", "gh-pages")
    assert last_call(runner)[0] == ("git", "fetch", "origin", "gh-pages:gh-pages")


def test_worktree_attach_commands(git, runner):
    git.add_worktree(WORKSPACE, "gh-pages")
    assert last_call(runner)[0] == (
        "git", "worktree", "add", "-f", str(WORKSPACE), "gh-pages",
    )

    git.add_detached_worktree(WORKSPACE)
    assert last_call(runner)[0] == ("git", "worktree", "add", "--detach", str(WORKSPACE))


def test_worktree_local_commands_run_inside_workspace(git, runner):
    git.checkout_orphan(WORKSPACE, "gh-pages")
    git.remove_tracked_files(WORKSPACE)
    git.stage_all(WORKSPACE)
    git.commit(WORKSPACE, 'Deploy "v2" & more')
    git.push(WORKSPACE, "origin", "gh-pages")

    argvs = [call[0] for call in runner.calls]
    assert argvs == [
        ("git", "checkout", "--orphan", "gh-pages"),
        ("git", "rm", "-rf", "--quiet", "."),
        ("git", "add", "-A"),
        ("git", "commit", "--allow-empty", "-m", 'Deploy "v2" & more'),
        ("git", "push", "origin", "gh-pages"),
    ]
    assert all(call[1] == WORKSPACE for call in runner.calls)


def test_custom_executable(runner):
    git = GitCLIAdapter(runner=runner, repo_root=REPO, executable="/usr/local/bin/git")
    git.prune_worktrees()
    assert last_call(runner)[0][0] == "/usr/local/bin/git"

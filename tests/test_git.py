"""Tests for lcrelease.git module."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lcrelease.git import (
    GitBranchLookup,
    GitError,
    GitNotFoundError,
    RefNotFoundError,
    _run_git_command,
    _run_git_command_quiet,
    get_commits,
    get_default_base,
    get_remote_branches_containing,
    get_repo_root,
    git_succeeds,
    parse_log_output,
    ref_exists,
    resolve_range,
    resolve_ref,
)


def _fake_refs(mocker, existing):
    """Make `git show-ref --verify` succeed only for refs in `existing`."""
    def fake_run(args, **kwargs):
        if args[:2] == ["git", "show-ref"]:
            if args[-1] in existing:
                return MagicMock(stdout="", returncode=0)
            return MagicMock(stdout="", stderr="", returncode=1)
        return MagicMock(stdout="", returncode=0)

    return mocker.patch("subprocess.run", side_effect=fake_run)


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_result.returncode = 0

        mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_git_command(["status"])
        assert result == "output"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout="", stderr="error\n", returncode=1),
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed (exit 1): git invalid" in str(exc_info.value)
        assert str(exc_info.value).endswith("error")

    def test_does_not_ask_subprocess_to_raise(self, mocker):
        """Test that the exit status is checked here, not by subprocess."""
        mock_run = mocker.patch(
            "subprocess.run", return_value=MagicMock(stdout="", returncode=0)
        )

        _run_git_command(["status"])

        assert mock_run.call_args.kwargs["check"] is False

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitNotFoundError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitNotFoundError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestRunGitCommandQuiet:
    """Tests for _run_git_command_quiet function."""

    def test_successful_command(self, mocker):
        """Test that output is returned stripped."""
        mocker.patch("subprocess.run", return_value=MagicMock(stdout="value\n", returncode=0))
        assert _run_git_command_quiet(["config", "x"]) == "value"

    def test_failure_gives_empty_string(self, mocker):
        """Test that a non-zero exit is not an error."""
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout="partial", stderr="fatal", returncode=1),
        )
        assert _run_git_command_quiet(["config", "x"]) == ""

    def test_git_not_found_raises_error(self, mocker):
        """Test that a missing git binary is still reported."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())
        with pytest.raises(GitNotFoundError):
            _run_git_command_quiet(["config", "x"])


class TestGitSucceeds:
    """Tests for git_succeeds function."""

    def test_zero_exit(self, mocker):
        """Test that exit status 0 is success."""
        mocker.patch("subprocess.run", return_value=MagicMock(stdout="", returncode=0))
        assert git_succeeds(["show-ref", "--verify", "--quiet", "refs/heads/main"]) is True

    def test_non_zero_exit(self, mocker):
        """Test that any other exit status is failure."""
        mocker.patch("subprocess.run", return_value=MagicMock(stdout="", returncode=1))
        assert git_succeeds(["show-ref", "--verify", "--quiet", "refs/heads/nope"]) is False

    def test_git_not_found_raises_error(self, mocker):
        """Test that a missing git binary is not taken for failure."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())
        with pytest.raises(GitNotFoundError):
            git_succeeds(["status"])


class TestGetRepoRoot:
    """Tests for get_repo_root function."""

    def test_returns_path(self, mocker):
        """Test that repo root path is returned."""
        mock_result = MagicMock()
        mock_result.stdout = "/path/to/repo\n"
        mock_result.returncode = 0

        mocker.patch("subprocess.run", return_value=mock_result)

        result = get_repo_root()
        assert result == Path("/path/to/repo")

    def test_raises_error_if_not_repo(self, mocker):
        """Test error if not in a git repository."""
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout="", stderr="not a git repo", returncode=128),
        )

        with pytest.raises(GitError) as exc_info:
            get_repo_root()

        assert "Not in a git repository" in str(exc_info.value)

    def test_git_missing_is_not_masked(self, mocker):
        """Test that a missing git binary is reported as such."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitNotFoundError):
            get_repo_root()


class TestRefExists:
    """Tests for ref_exists function."""

    def test_existing_ref(self, mocker):
        """Test that a verified ref exists."""
        mock_run = _fake_refs(mocker, {"refs/heads/main"})
        assert ref_exists("refs/heads/main") is True
        args = mock_run.call_args[0][0]
        assert args == ["git", "show-ref", "--verify", "--quiet", "refs/heads/main"]

    def test_missing_ref(self, mocker):
        """Test that an unknown ref doesn't exist."""
        _fake_refs(mocker, set())
        assert ref_exists("refs/heads/nope") is False

    def test_git_missing_propagates(self, mocker):
        """Test that a missing git binary is not taken for a missing ref."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())
        with pytest.raises(GitNotFoundError):
            ref_exists("refs/heads/main")


class TestResolveRef:
    """Tests for resolve_ref function."""

    def test_remote_branch(self, mocker):
        """Test origin/release is kept as is."""
        _fake_refs(mocker, {"refs/remotes/origin/release"})
        assert resolve_ref("origin/release") == "origin/release"

    def test_local_branch(self, mocker):
        """Test local branch."""
        _fake_refs(mocker, {"refs/heads/develop"})
        assert resolve_ref("develop") == "develop"

    def test_short_name_of_remote_branch(self, mocker):
        """Test that 'release' resolves to origin/release."""
        _fake_refs(mocker, {"refs/remotes/origin/release"})
        assert resolve_ref("release") == "origin/release"

    def test_local_branch_preferred_over_remote_short_name(self, mocker):
        """Test lookup order."""
        _fake_refs(mocker, {"refs/heads/release", "refs/remotes/origin/release"})
        assert resolve_ref("release") == "release"

    def test_custom_remote(self, mocker):
        """Test short name lookup on another remote."""
        _fake_refs(mocker, {"refs/remotes/upstream/release"})
        assert resolve_ref("release", remote="upstream") == "upstream/release"

    def test_tag(self, mocker):
        """Test tag lookup."""
        _fake_refs(mocker, {"refs/tags/v1.0.0"})
        assert resolve_ref("v1.0.0") == "v1.0.0"

    def test_not_found(self, mocker):
        """Test that an unknown name raises RefNotFoundError."""
        _fake_refs(mocker, set())
        with pytest.raises(RefNotFoundError) as exc_info:
            resolve_ref("ghost")
        assert exc_info.value.ref == "ghost"
        assert str(exc_info.value) == "Ref not found: ghost"


class TestGetDefaultBase:
    """Tests for get_default_base function."""

    def test_main(self, mocker):
        """Test origin/main is preferred."""
        _fake_refs(mocker, {"refs/remotes/origin/main", "refs/remotes/origin/master"})
        assert get_default_base() == "origin/main"

    def test_master(self, mocker):
        """Test origin/master fallback."""
        _fake_refs(mocker, {"refs/remotes/origin/master"})
        assert get_default_base() == "origin/master"

    def test_neither(self, mocker):
        """Test error when no default branch exists."""
        _fake_refs(mocker, set())
        with pytest.raises(GitError) as exc_info:
            get_default_base()
        assert "origin/main" in str(exc_info.value)


class TestResolveRange:
    """Tests for resolve_range function."""

    def test_single_target(self, mocker):
        """Test <base>..<target> range."""
        _fake_refs(mocker, {"refs/heads/feature/x", "refs/remotes/origin/main"})
        assert resolve_range("feature/x") == "origin/main..feature/x"

    def test_source_and_destination(self, mocker):
        """Test <destination>..<source> range."""
        _fake_refs(mocker, {"refs/heads/develop", "refs/remotes/origin/release"})
        assert resolve_range("develop", "release") == "origin/release..develop"

    def test_unknown_destination(self, mocker):
        """Test that an unknown destination is reported."""
        _fake_refs(mocker, {"refs/heads/develop"})
        with pytest.raises(RefNotFoundError) as exc_info:
            resolve_range("develop", "nowhere")
        assert exc_info.value.ref == "nowhere"


class TestParseLogOutput:
    """Tests for parse_log_output function."""

    def test_parses_records(self, sample_log_output):
        """Test that each line becomes a CommitRecord."""
        commits = parse_log_output(sample_log_output)
        assert len(commits) == 2
        assert commits[0].short_id == "a1b2c3d"
        assert commits[0].author_email == "ccassinat@x.com"
        assert commits[0].date == "16/02/2026 - 15:42"
        assert commits[0].subject == "[#12345] feat: add sorting"

    def test_pipes_in_subject_are_kept(self, sample_log_output):
        """Test that subjects may contain any character but the separator."""
        commits = parse_log_output(sample_log_output)
        assert commits[1].subject == "fix(api): handle a|b pipes"

    def test_skips_malformed_lines(self):
        """Test that incomplete lines are ignored."""
        assert parse_log_output("garbage\n\n") == []

    def test_empty_subject(self):
        """Test that an empty subject is allowed."""
        commits = parse_log_output("abc\x1fa@b\x1fdate\x1f")
        assert commits[0].subject == ""

    def test_stripped_empty_subject(self):
        """Test that a last line whose separator was stripped is kept."""
        commits = parse_log_output("abc\x1fa@b\x1fdate\x1ffeat: x\ndef\x1fc@d\x1fdate")
        assert [c.short_id for c in commits] == ["abc", "def"]
        assert commits[1].subject == ""


class TestGetCommits:
    """Tests for get_commits function."""

    def test_runs_git_log(self, mocker, sample_log_output):
        """Test the git log invocation."""
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout=sample_log_output, returncode=0),
        )

        commits = get_commits("origin/main..feature")

        args = mock_run.call_args[0][0]
        assert args[:3] == ["git", "log", "origin/main..feature"]
        assert "--no-merges" in args
        assert "--date=format:%d/%m/%Y - %H:%M" in args
        assert len(commits) == 2

    def test_empty_range(self, mocker):
        """Test that an empty range gives no commits."""
        mocker.patch("subprocess.run", return_value=MagicMock(stdout="", returncode=0))
        assert get_commits("a..b") == []


class TestBranchLookup:
    """Tests for get_remote_branches_containing and GitBranchLookup."""

    def test_parses_branch_list(self, mocker):
        """Test that indentation and the current-branch marker are stripped."""
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=MagicMock(
                stdout="  origin/HEAD -> origin/main\n  origin/ABC-1-x\n* origin/main\n",
                returncode=0,
            ),
        )

        branches = get_remote_branches_containing("abc1234")

        assert branches == ["origin/HEAD -> origin/main", "origin/ABC-1-x", "origin/main"]
        args = mock_run.call_args[0][0]
        assert args == ["git", "branch", "-r", "--contains", "abc1234"]

    def test_failure_gives_empty_list(self, mocker):
        """Test that an unknown commit gives no branches."""
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout="", stderr="malformed object", returncode=129),
        )
        assert get_remote_branches_containing("zzz") == []

    def test_lookup_delegates(self, mocker):
        """Test that GitBranchLookup uses git."""
        mocker.patch(
            "subprocess.run",
            return_value=MagicMock(stdout="  origin/123456-fix\n", returncode=0),
        )
        assert GitBranchLookup().branches_containing("abc1234") == ["origin/123456-fix"]

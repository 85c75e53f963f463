"""
Squash merge 설정 스크립트 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from github import GithubException

from scripts.github_admin.squash_merge import (
    MergePreferences,
    check_merge_preferences,
    set_squash_merge_preference,
)


def make_repo(squash=True, merge_commit=False, rebase=False):
    repo = MagicMock()
    repo.full_name = "owner/repo"
    repo.allow_squash_merge = squash
    repo.allow_merge_commit = merge_commit
    repo.allow_rebase_merge = rebase
    return repo


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_set_squash_merge_preference(mock_get_repo, isolated_env):
    """Squash merge만 허용하고 PR 제목/본문을 커밋 메시지로 사용하는지 테스트"""
    repo = make_repo()
    mock_get_repo.return_value = repo

    set_squash_merge_preference()

    repo.edit.assert_called_once_with(
        allow_squash_merge=True,
        allow_merge_commit=False,
        allow_rebase_merge=False,
        use_squash_pr_title_as_default=True,
        squash_merge_commit_title="PR_TITLE",
        squash_merge_commit_message="PR_BODY",
    )
    marker = isolated_env / ".gh-settings" / "squash-merge"
    assert marker.read_text(encoding="utf-8").startswith("installed=")


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_set_squash_merge_preference_dry_run(mock_get_repo, isolated_env):
    repo = make_repo()
    mock_get_repo.return_value = repo

    set_squash_merge_preference(dry_run=True)

    repo.edit.assert_not_called()
    assert not (isolated_env / ".gh-settings").exists()


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_set_squash_merge_preference_api_error_exits(mock_get_repo, isolated_env, capsys):
    repo = make_repo()
    repo.edit.side_effect = GithubException(404, {"message": "Not Found"}, None)
    mock_get_repo.return_value = repo

    with pytest.raises(SystemExit) as exc_info:
        set_squash_merge_preference()

    assert exc_info.value.code == 1
    assert "저장소 설정 업데이트 중 오류 발생: Not Found" in capsys.readouterr().err
    assert not (isolated_env / ".gh-settings" / "squash-merge").exists()


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_check_merge_preferences(mock_get_repo, capsys):
    mock_get_repo.return_value = make_repo(squash=True, merge_commit=True, rebase=False)

    result = check_merge_preferences()

    assert result == MergePreferences(
        allow_squash_merge=True, allow_merge_commit=True, allow_rebase_merge=False
    )
    out = capsys.readouterr().out
    assert "Squash merge: ✅ 활성화" in out
    assert "Merge commit: ✅ 활성화" in out
    assert "Rebase merge: ❌ 비활성화" in out
    assert "'squash-merge' 명령" not in out


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_check_merge_preferences_squash_disabled_hint(mock_get_repo, capsys):
    mock_get_repo.return_value = make_repo(squash=False, merge_commit=True)

    result = check_merge_preferences()

    assert result.allow_squash_merge is False
    assert "'squash-merge' 명령" in capsys.readouterr().out


@patch("scripts.github_admin.squash_merge.get_target_repository")
def test_check_merge_preferences_repository_error_exits(mock_get_repo):
    mock_get_repo.side_effect = GithubException(401, {"message": "Bad credentials"}, None)

    with pytest.raises(SystemExit) as exc_info:
        check_merge_preferences()

    assert exc_info.value.code == 1

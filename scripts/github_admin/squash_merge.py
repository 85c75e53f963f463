"""
GitHub PR merge 방식을 Squash merge로 설정하는 스크립트

필요한 권한:
    GITHUB_TOKEN에 최소한 'repo' 스코프 권한이 필요합니다.

기능:
    - 저장소 설정에서 PR merge 방식을 Squash merge로 설정합니다.
    - 다른 merge 방식(merge commit, rebase merge)은 비활성화합니다.
    - Squash merge 시 PR 제목과 설명을 유지하도록 설정합니다.

사용법:
    python scripts/github_admin/squash_merge.py [--check] [--dry-run]
"""

import argparse
import os
import sys
from dataclasses import dataclass

from github import GithubException
from github.Repository import Repository

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from scripts.github_admin.common import format_github_error, get_target_repository
from service.gh_settings import record_configured

FEATURE_NAME = "squash-merge"

# Squash merge만 활성화하고, PR 제목과 설명을 커밋 메시지로 사용
SQUASH_MERGE_SETTINGS = {
    "allow_squash_merge": True,
    "allow_merge_commit": False,
    "allow_rebase_merge": False,
    "use_squash_pr_title_as_default": True,
    "squash_merge_commit_title": "PR_TITLE",
    "squash_merge_commit_message": "PR_BODY",
}


@dataclass
class MergePreferences:
    """저장소의 PR merge 방식 설정"""

    allow_squash_merge: bool
    allow_merge_commit: bool
    allow_rebase_merge: bool


def _enabled_label(value: bool) -> str:
    return "✅ 활성화" if value else "❌ 비활성화"


def _load_repository() -> Repository:
    try:
        return get_target_repository()
    except (ValueError, GithubException) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


def set_squash_merge_preference(dry_run: bool = False) -> None:
    """
    저장소의 PR merge 방식을 Squash merge로 설정하는 함수

    Args:
        dry_run: dry-run 모드 여부
    """
    repo = _load_repository()
    print(f"🔍 저장소 merge 설정 업데이트 중: {repo.full_name}")

    if dry_run:
        print(f"[DRY-RUN] {repo.full_name}: Squash merge 설정 적용 예정")
        return

    try:
        repo.edit(**SQUASH_MERGE_SETTINGS)
    except GithubException as e:
        print(
            f"❌ 저장소 설정 업데이트 중 오류 발생: {format_github_error(e)}",
            file=sys.stderr,
        )
        sys.exit(1)

    print(f"✅ PR merge 방식이 Squash merge로 설정되었습니다: {repo.full_name}")
    print("ℹ️ 설정 내용:")
    print("  - Squash merge: 활성화")
    print("  - Merge commit: 비활성화")
    print("  - Rebase merge: 비활성화")
    print("  - Squash merge 시 PR 제목과 설명을 유지")

    record_configured(FEATURE_NAME)


def check_merge_preferences() -> MergePreferences:
    """
    저장소의 현재 merge 설정을 확인하는 함수

    Returns:
        MergePreferences: 현재 merge 방식 허용 여부
    """
    repo = _load_repository()
    print(f"🔍 저장소 merge 설정 확인 중: {repo.full_name}")

    try:
        preferences = MergePreferences(
            allow_squash_merge=bool(repo.allow_squash_merge),
            allow_merge_commit=bool(repo.allow_merge_commit),
            allow_rebase_merge=bool(repo.allow_rebase_merge),
        )
    except GithubException as e:
        print(
            f"❌ 저장소 설정 확인 중 오류 발생: {format_github_error(e)}",
            file=sys.stderr,
        )
        sys.exit(1)

    print("\n📊 현재 merge 설정 상태:")
    print(f"  - Squash merge: {_enabled_label(preferences.allow_squash_merge)}")
    print(f"  - Merge commit: {_enabled_label(preferences.allow_merge_commit)}")
    print(f"  - Rebase merge: {_enabled_label(preferences.allow_rebase_merge)}")

    if not preferences.allow_squash_merge:
        print(
            "\nℹ️ Squash merge가 비활성화되어 있습니다. "
            "활성화하려면 'squash-merge' 명령을 실행하세요."
        )

    return preferences


def main():
    parser = argparse.ArgumentParser(
        description="리포지토리의 PR merge 방식을 Squash merge로 설정합니다."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="설정을 바꾸지 않고 현재 상태만 확인",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="실제 변경 없이 설정이 적용될지 확인",
    )
    args = parser.parse_args()

    if args.check:
        check_merge_preferences()
    else:
        set_squash_merge_preference(dry_run=args.dry_run)


if __name__ == "__main__":
    main()

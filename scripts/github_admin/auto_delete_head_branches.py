"""
리포지토리에 delete_branch_on_merge 설정을 적용하는 스크립트

PR 병합 시 head 브랜치를 자동으로 삭제하도록 설정합니다.

사용법:
    python scripts/github_admin/auto_delete_head_branches.py [--check] [--dry-run]

옵션:
    --check: 설정을 바꾸지 않고 현재 상태만 확인
    --dry-run: 실제 변경 없이 설정이 적용될지 확인
"""

import argparse
import os
import sys

from github import GithubException
from github.Repository import Repository

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from scripts.github_admin.common import format_github_error, get_target_repository
from service.gh_settings import record_configured

FEATURE_NAME = "auto-delete-branch"


def update_delete_branch_on_merge(repo: Repository, enable: bool = True) -> bool:
    """
    리포지토리의 delete_branch_on_merge 설정을 업데이트하는 함수

    Args:
        repo: PyGithub Repository 객체
        enable: 활성화 여부 (기본값: True)

    Returns:
        bool: 변경이 필요했으면 True, 이미 설정되어 있으면 False
    """
    # 현재 설정 확인
    if repo.delete_branch_on_merge == enable:
        return False

    # 설정 업데이트
    repo.edit(delete_branch_on_merge=enable)
    return True


def _load_repository() -> Repository:
    try:
        return get_target_repository()
    except (ValueError, GithubException) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


def enable_auto_delete_merged_branches(dry_run: bool = False) -> bool:
    """
    머지된 PR의 브랜치 자동 삭제 옵션을 활성화하는 함수

    Args:
        dry_run: dry-run 모드 여부

    Returns:
        bool: 설정을 변경했으면 True
    """
    repo = _load_repository()
    print(f"🔍 브랜치 자동 삭제 설정 업데이트 중: {repo.full_name}")

    try:
        if repo.delete_branch_on_merge:
            print(f"[SKIP] {repo.full_name}: 이미 설정됨")
            changed = False
        elif dry_run:
            print(f"[DRY-RUN] {repo.full_name}: 설정 적용 예정")
            return False
        else:
            changed = update_delete_branch_on_merge(repo, enable=True)
            print(f"✅ 머지된 PR의 브랜치 자동 삭제가 활성화되었습니다: {repo.full_name}")
    except GithubException as e:
        print(
            f"❌ 저장소 설정 업데이트 중 오류 발생: {format_github_error(e)}",
            file=sys.stderr,
        )
        sys.exit(1)

    if not dry_run:
        record_configured(FEATURE_NAME)
    return changed


def check_auto_delete_merged_branches_status() -> bool:
    """
    머지된 PR의 브랜치 자동 삭제 옵션 상태를 확인하는 함수

    Returns:
        bool: 활성화되어 있으면 True
    """
    repo = _load_repository()
    print(f"🔍 브랜치 자동 삭제 설정 확인 중: {repo.full_name}")

    try:
        enabled = bool(repo.delete_branch_on_merge)
    except GithubException as e:
        print(
            f"❌ 저장소 설정 확인 중 오류 발생: {format_github_error(e)}",
            file=sys.stderr,
        )
        sys.exit(1)

    status = "✅ 활성화" if enabled else "❌ 비활성화"
    print(f"\n📊 머지된 PR의 브랜치 자동 삭제: {status}")
    if not enabled:
        print("\nℹ️ 활성화하려면 'auto-delete' 명령을 실행하세요.")
    return enabled


def main():
    parser = argparse.ArgumentParser(
        description="리포지토리에 delete_branch_on_merge 설정을 적용합니다."
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
        check_auto_delete_merged_branches_status()
    else:
        enable_auto_delete_merged_branches(dry_run=args.dry_run)


if __name__ == "__main__":
    main()

"""
리포지토리의 주요 브랜치에 Branch Protection 규칙을 적용하는 스크립트

필요한 권한:
    GITHUB_TOKEN에 최소한 'repo' 스코프 권한이 필요합니다.

사용법:
    python scripts/github_admin/protect_branch.py [--dry-run]

옵션:
    --dry-run: 실제 변경 없이 어떤 브랜치가 생성/보호될지 확인

동작:
    - PROTECTED_BRANCHES(기본값: main,develop)에 지정된 브랜치가 없으면
      기본 브랜치에서 새로 생성 (실패해도 다음 브랜치로 계속 진행)
    - 존재하는 브랜치에 보호 규칙 적용
      (PR 리뷰 1명 승인 필수, force push 및 삭제 금지)
"""

import argparse
import os
import sys

from github import GithubException
from github.Repository import Repository

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from scripts.github_admin.common import (
    format_github_error,
    get_protected_branches,
    get_target_repository,
)
from service.gh_settings import record_configured

FEATURE_NAME = "protect-branch"

REQUIRED_APPROVING_REVIEW_COUNT = 1


def create_missing_branches(
    repo: Repository, branch_names: list[str], dry_run: bool = False
) -> list[str]:
    """
    없는 브랜치를 기본 브랜치에서 생성하는 함수

    개별 브랜치 생성에 실패하면 오류를 출력하고 다음 브랜치로 넘어갑니다.

    Args:
        repo: PyGithub Repository 객체
        branch_names: 보호할 브랜치 이름 목록
        dry_run: dry-run 모드 여부

    Returns:
        list[str]: 보호 규칙을 적용할 수 있는 (존재하는) 브랜치 목록
    """
    existing = {branch.name for branch in repo.get_branches()}
    missing = [name for name in branch_names if name not in existing]
    if not missing:
        return list(branch_names)

    default_branch = repo.default_branch
    base_sha = repo.get_branch(default_branch).commit.sha

    for name in missing:
        if dry_run:
            print(f"[DRY-RUN] {name}: '{default_branch}'에서 브랜치 생성 예정")
            existing.add(name)
            continue

        try:
            repo.create_git_ref(ref=f"refs/heads/{name}", sha=base_sha)
            print(f"✅ 브랜치 생성 완료: {name} (기준: {default_branch})")
            existing.add(name)
        except GithubException as e:
            print(
                f"❌ 브랜치 생성 실패 ({name}): {format_github_error(e)}",
                file=sys.stderr,
            )

    return [name for name in branch_names if name in existing]


def protect_branch(repo: Repository, branch_name: str) -> None:
    """
    단일 브랜치에 보호 규칙을 적용하는 함수

    Args:
        repo: PyGithub Repository 객체
        branch_name: 보호할 브랜치 이름
    """
    branch = repo.get_branch(branch_name)
    branch.edit_protection(
        required_approving_review_count=REQUIRED_APPROVING_REVIEW_COUNT,
        dismiss_stale_reviews=True,
        enforce_admins=False,
        allow_force_pushes=False,
        allow_deletions=False,
    )


def protect_branches(dry_run: bool = False) -> list[str]:
    """
    설정된 모든 브랜치에 보호 규칙을 적용하는 함수

    Args:
        dry_run: dry-run 모드 여부

    Returns:
        list[str]: 보호 규칙이 적용된 브랜치 목록
    """
    try:
        branch_names = get_protected_branches()
        repo = get_target_repository()
    except (ValueError, GithubException) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    print(f"🔍 브랜치 보호 규칙 설정 중: {repo.full_name}")
    print(f"대상 브랜치: {', '.join(branch_names)}")
    print("-" * 50)

    try:
        targets = create_missing_branches(repo, branch_names, dry_run=dry_run)

        for name in targets:
            if dry_run:
                print(f"[DRY-RUN] {name}: 보호 규칙 적용 예정")
                continue
            protect_branch(repo, name)
            print(f"✅ 브랜치 보호 규칙 적용 완료: {name}")
    except GithubException as e:
        print(
            f"❌ 브랜치 보호 규칙 설정 중 오류 발생: {format_github_error(e)}",
            file=sys.stderr,
        )
        sys.exit(1)

    print("-" * 50)
    print("ℹ️ 설정 내용:")
    print(f"  - PR 리뷰 승인 필수: {REQUIRED_APPROVING_REVIEW_COUNT}명")
    print("  - 새 커밋 push 시 기존 승인 무효화")
    print("  - Force push 및 브랜치 삭제 금지")

    if not targets:
        print("❌ 보호 규칙을 적용한 브랜치가 없습니다.", file=sys.stderr)
    elif not dry_run:
        record_configured(FEATURE_NAME)

    return targets


def main():
    parser = argparse.ArgumentParser(
        description="리포지토리의 주요 브랜치에 Branch Protection 규칙을 적용합니다."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="실제 변경 없이 어떤 브랜치가 생성/보호될지 확인",
    )
    args = parser.parse_args()

    protect_branches(dry_run=args.dry_run)


if __name__ == "__main__":
    main()

"""
GitHub 저장소 관리 도구 - 메인 진입점

모든 기능을 하나의 명령어로 모아서 제공합니다.
특정 기능만 사용하려면 scripts/github_admin/ 아래의 스크립트를 직접 실행할 수도 있습니다.

사용법:
    python main.py [명령어] [--dry-run]
"""

import argparse
import sys

from dotenv import load_dotenv
from github import GithubException

from scripts.github_admin.auto_delete_head_branches import (
    check_auto_delete_merged_branches_status,
    enable_auto_delete_merged_branches,
)
from scripts.github_admin.protect_branch import protect_branches
from scripts.github_admin.squash_merge import (
    check_merge_preferences,
    set_squash_merge_preference,
)

load_dotenv()

# ============================================================================
# 명령어 목록
# ============================================================================

COMMANDS = {
    "protect": "브랜치 보호 규칙 설정",
    "auto-delete": "머지된 PR의 브랜치 자동 삭제 옵션 활성화",
    "check-auto-delete": "머지된 PR의 브랜치 자동 삭제 옵션 상태 확인",
    "squash-merge": "PR 병합 방식을 Squash merge로 설정",
    "check-merge": "현재 PR 병합 방식 설정 확인",
    "all": "모든 기능 실행 (브랜치 보호 규칙 설정 + 자동 삭제 옵션 활성화 + Squash merge 설정)",
}


def show_help() -> None:
    """도움말 표시"""
    print("\n🛠️ GitHub 저장소 관리 도구 🛠️")
    print("\n사용 방법: python main.py [명령어] [--dry-run]")
    print("\n사용 가능한 명령어:")

    for command, description in COMMANDS.items():
        print(f"  - {command}: {description}")

    print("\n예시:")
    width = max(len(command) for command in COMMANDS)
    for command, description in COMMANDS.items():
        print(f"  python main.py {command.ljust(width)} # {description}")
    print("")


def run_all(dry_run: bool = False) -> None:
    """브랜치 보호 → 자동 삭제 → Squash merge 순서로 모든 기능을 실행합니다."""
    print("🚀 모든 기능 실행 중...")
    protect_branches(dry_run=dry_run)
    print("\n")
    enable_auto_delete_merged_branches(dry_run=dry_run)
    print("\n")
    set_squash_merge_preference(dry_run=dry_run)


def run_command(command: str, dry_run: bool = False) -> None:
    """명령어 이름에 해당하는 기능을 실행합니다. 알 수 없는 명령어는 도움말을 표시합니다."""
    if command == "protect":
        protect_branches(dry_run=dry_run)
    elif command == "auto-delete":
        enable_auto_delete_merged_branches(dry_run=dry_run)
    elif command == "check-auto-delete":
        check_auto_delete_merged_branches_status()
    elif command == "squash-merge":
        set_squash_merge_preference(dry_run=dry_run)
    elif command == "check-merge":
        check_merge_preferences()
    elif command == "all":
        run_all(dry_run=dry_run)
    else:
        show_help()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="GitHub 저장소 정책(브랜치 보호, 브랜치 자동 삭제, Squash merge)을 설정합니다.",
        add_help=False,
    )
    parser.add_argument("command", nargs="?", default="help")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="실제 변경 없이 적용될 내용만 확인",
    )
    parser.add_argument("-h", "--help", action="store_true", help="도움말 표시")
    args = parser.parse_args(argv)
    if args.help:
        args.command = "help"

    try:
        run_command(args.command, dry_run=args.dry_run)
    except (ValueError, GithubException) as e:
        print(f"❌ 오류 발생: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

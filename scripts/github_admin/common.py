"""
GitHub API 공통 유틸리티 모듈

PyGithub 라이브러리를 사용하여 현재 작업 디렉토리의 리포지토리 설정을 관리합니다.
보안을 위해 토큰은 환경변수로 관리됩니다.
"""

import os
import re
import subprocess
import sys

from dotenv import load_dotenv
from github import Auth, Github, GithubException
from github.Repository import Repository

# 작업 디렉토리의 .env 파일 로드
load_dotenv()

DEFAULT_PROTECTED_BRANCHES = "main,develop"

# https://github.com/OWNER/REPO(.git), git@github.com:OWNER/REPO(.git), ssh://git@github.com(:PORT)/OWNER/REPO(.git)
# 호스트 이름은 대소문자를 구분하지 않음
REMOTE_URL_PATTERN = re.compile(
    r"^(?:(?:https?://(?:[^@/]+@)?|ssh://git@)(?i:github\.com)(?::\d+)?/|git@(?i:github\.com):)"
    r"(?P<owner>[A-Za-z0-9_.-]+)/(?P<repo>[A-Za-z0-9_.-]+?)(?:\.git)?/?$"
)


def get_github_token() -> str:
    """
    GitHub 토큰을 환경변수에서 가져오는 함수

    Returns:
        str: GitHub Personal Access Token

    Raises:
        ValueError: GITHUB_TOKEN 환경변수가 설정되지 않은 경우
    """
    token = os.getenv("GITHUB_TOKEN", "").strip()
    if not token:
        raise ValueError(
            "GITHUB_TOKEN이 필요합니다. "
            "'repo' 스코프 권한이 있는 토큰을 .env 파일에 설정해주세요."
        )

    # 토큰 형식 기본 검증 (ghp_ 또는 github_pat_ 접두사)
    if not (token.startswith("ghp_") or token.startswith("github_pat_")):
        print(
            "경고: GitHub 토큰 형식이 예상과 다릅니다. "
            "Personal Access Token 또는 Fine-grained Token인지 확인해주세요.",
            file=sys.stderr,
        )

    return token


def get_github_client(token: str | None = None) -> Github:
    """
    GitHub 클라이언트를 생성하는 함수

    Args:
        token: GitHub 토큰 (None이면 환경변수에서 가져옴)

    Returns:
        Github: PyGithub 클라이언트 인스턴스
    """
    if token is None:
        token = get_github_token()

    return Github(auth=Auth.Token(token), timeout=30)


def get_protected_branches() -> list[str]:
    """
    보호할 브랜치 목록을 환경변수 PROTECTED_BRANCHES에서 가져오는 함수

    Returns:
        list[str]: 브랜치 이름 목록 (비어 있으면 기본값: main, develop)
    """
    raw = os.getenv("PROTECTED_BRANCHES") or ""
    branches = [name.strip() for name in raw.split(",") if name.strip()]
    if not branches:
        branches = DEFAULT_PROTECTED_BRANCHES.split(",")
    return branches


def parse_remote_url(url: str) -> tuple[str, str]:
    """
    Git remote URL에서 owner와 repo 이름을 추출하는 함수

    Args:
        url: HTTPS 또는 SSH 형식의 GitHub remote URL

    Returns:
        tuple: (owner, repo)

    Raises:
        ValueError: GitHub URL 형식이 아닌 경우
    """
    match = REMOTE_URL_PATTERN.match(url.strip())
    if not match:
        raise ValueError(f"GitHub 저장소 URL을 해석할 수 없습니다: {url}")
    return match.group("owner"), match.group("repo")


def get_git_remote_url(remote: str = "origin") -> str:
    """
    로컬 Git 저장소의 remote URL을 가져오는 함수

    Args:
        remote: remote 이름 (기본값: origin)

    Returns:
        str: remote URL

    Raises:
        ValueError: git 명령이 실패했거나 remote가 설정되지 않은 경우
    """
    try:
        result = subprocess.run(
            ["git", "config", "--get", f"remote.{remote}.url"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise ValueError(f"Git remote '{remote}' URL을 가져올 수 없습니다.") from e

    url = result.stdout.strip()
    if not url:
        raise ValueError(f"Git remote '{remote}' URL이 비어 있습니다.")
    return url


def get_git_remote_info() -> tuple[str, str]:
    """
    대상 리포지토리의 owner와 repo 이름을 결정하는 함수

    GITHUB_REPOSITORY 환경변수(OWNER/REPO)가 있으면 우선 사용하고,
    없으면 origin remote URL에서 추출합니다.

    Returns:
        tuple: (owner, repo)
    """
    full_name = os.getenv("GITHUB_REPOSITORY", "").strip()
    if full_name:
        owner, _, repo = full_name.partition("/")
        if not owner or not repo or "/" in repo:
            raise ValueError(
                f"GITHUB_REPOSITORY 형식이 올바르지 않습니다 (OWNER/REPO): {full_name}"
            )
        return owner, repo

    return parse_remote_url(get_git_remote_url())


def get_target_repository(g: Github | None = None) -> Repository:
    """
    설정 대상 리포지토리 객체를 가져오는 함수

    Args:
        g: PyGithub 클라이언트 (None이면 새로 생성)

    Returns:
        Repository: PyGithub Repository 객체

    Raises:
        ValueError: 리포지토리를 찾을 수 없는 경우
    """
    if g is None:
        g = get_github_client()

    owner, repo_name = get_git_remote_info()
    try:
        return g.get_repo(f"{owner}/{repo_name}")
    except GithubException as e:
        if e.status == 404:
            raise ValueError(
                f"리포지토리 '{owner}/{repo_name}'을 찾을 수 없습니다."
            ) from e
        raise


def format_github_error(e: GithubException) -> str:
    """GithubException에서 사람이 읽을 수 있는 메시지를 꺼냅니다."""
    if isinstance(e.data, dict):
        return e.data.get("message", str(e))
    return str(e)

"""pytest 설정 파일"""

import os
import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# 테스트 환경에서 필요한 환경 변수 기본값 설정
os.environ.setdefault("GITHUB_TOKEN", "ghp_test-dummy-token")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    테스트마다 작업 디렉토리를 임시 디렉토리로 바꾸고 저장소 관련 환경변수를 초기화합니다.
    (.gh-settings 기록이 프로젝트 루트에 남지 않도록)
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test-dummy-token")
    monkeypatch.delenv("PROTECTED_BRANCHES", raising=False)
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)
    return tmp_path

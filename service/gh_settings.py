"""
기능 설정 및 설치 상태를 기록하는 간단한 유틸리티

설정을 적용한 기능마다 .gh-settings/<기능 이름> 파일에 설치 시각을 남깁니다.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# 설치 기록을 저장할 디렉토리
INSTALL_DIR = Path(".gh-settings")


def ensure_install_dir(base_dir: Path | None = None) -> Path:
    """설치 기록 디렉토리를 확인하고 없으면 생성합니다."""
    install_dir = Path(base_dir) if base_dir is not None else INSTALL_DIR
    install_dir.mkdir(parents=True, exist_ok=True)
    return install_dir


def record_configured(feature_name: str, base_dir: Path | None = None) -> Path | None:
    """
    기능 설치/실행 여부를 기록하는 함수

    Args:
        feature_name: 기능 이름 (파일 이름으로 사용)
        base_dir: 기록 디렉토리 (None이면 .gh-settings)

    Returns:
        Path | None: 기록한 파일 경로, 실패 시 None
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        file_path = ensure_install_dir(base_dir) / feature_name
        file_path.write_text(f"installed={timestamp}\n", encoding="utf-8")
    except OSError as e:
        print(f"❌ 설치 기록 중 오류 발생 ({feature_name}): {e}", file=sys.stderr)
        return None

    print(f"✅ 기능 설치 기록: {feature_name}")
    return file_path

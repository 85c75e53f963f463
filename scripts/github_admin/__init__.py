"""
GitHub 저장소 정책 설정 스크립트 모음

이 패키지는 현재 작업 디렉토리의 GitHub 리포지토리(origin remote 기준) 설정을 관리하는 스크립트를 제공합니다.
패키지 이름이 github_admin인 이유: PyGithub의 github 패키지와 이름 충돌을 방지하기 위함.

스크립트 목록:
- protect_branch.py: 주요 브랜치에 Branch Protection 규칙 적용
- auto_delete_head_branches.py: PR 병합 시 head 브랜치 자동 삭제 설정
- squash_merge.py: PR 병합 방식을 Squash merge로 설정

사용 전 필수 환경변수:
- GITHUB_TOKEN: GitHub Personal Access Token ('repo' 스코프)

선택 환경변수:
- PROTECTED_BRANCHES: 보호할 브랜치 목록 (쉼표 구분, 기본값: main,develop)
- GITHUB_REPOSITORY: 대상 리포지토리 (OWNER/REPO, 없으면 origin remote에서 추출)

설정을 변경하는 스크립트는 모두 --dry-run 옵션을 지원합니다.
"""

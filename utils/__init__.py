"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    secure_random: 암호학적으로 안전한 난수 및 셔플
    exceptions: HTTP 에러 헬퍼
"""

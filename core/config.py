from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정을 관리하는 클래스.

    환경 변수에서 설정을 로드하며, 기본값을 제공합니다.
    비밀번호 정책 자체는 고정이며 설정 대상이 아닙니다.

    Attributes:
        ALLOWED_ORIGINS: CORS 허용 오리진 목록.
        DEBUG: 에러 응답에 상세 정보를 포함할지 여부.
        RATE_LIMIT_MAX_IPS: Rate Limiter가 추적하는 최대 IP 수.
        TRUSTED_PROXIES: 신뢰할 수 있는 리버스 프록시 IP 목록.
        DEFAULT_GENERATE_LENGTH: 길이를 지정하지 않은 생성 요청의 기본 길이.
        MAX_PASSWORD_INPUT_LENGTH: 검증/수정 요청에서 허용하는 최대 입력 길이.
    """

    ALLOWED_ORIGINS: list[str] = [
        "http://127.0.0.1:8080",  # 로컬 개발 (프론트엔드)
        "http://localhost:8080",  # 로컬 개발 (프론트엔드)
    ]

    # 프로덕션에서는 False로 설정하여 상세 에러 메시지 노출 방지
    DEBUG: bool = True

    RATE_LIMIT_MAX_IPS: int = 10000  # 메모리 보호를 위한 최대 추적 IP 수
    TRUSTED_PROXIES: set[str] = set()  # 프로덕션에서 nginx 등의 프록시 IP 설정 필요

    DEFAULT_GENERATE_LENGTH: int = 24
    MAX_PASSWORD_INPUT_LENGTH: int = 256

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()

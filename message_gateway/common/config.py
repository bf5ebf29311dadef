import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173",
    "https://message.gallerysoma.co.kr",
)


@dataclass(frozen=True)
class Settings:
    aws_region: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_s3_bucket_name: str = ""
    s3_endpoint: str = "s3.amazonaws.com"
    kakao_client_id: str = ""
    kakao_client_secret: str = ""
    kakao_redirect_uri: str = ""
    kakao_api_base_url: str = "https://kapi.kakao.com"
    kakao_auth_base_url: str = "https://kauth.kakao.com"
    cors_allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    upstream_timeout_seconds: float = 10.0
    port: int = 8080
    log_level: str = "INFO"
    log_json: bool = True


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        aws_region=os.getenv("AWS_REGION", ""),
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID", ""),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", ""),
        aws_s3_bucket_name=os.getenv("AWS_S3_BUCKET_NAME", ""),
        s3_endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
        kakao_client_id=os.getenv("KAKAO_CLIENT_ID", ""),
        kakao_client_secret=os.getenv("KAKAO_CLIENT_SECRET", ""),
        kakao_redirect_uri=os.getenv("KAKAO_REDIRECT_URI", ""),
        kakao_api_base_url=os.getenv("KAKAO_API_BASE_URL", "https://kapi.kakao.com"),
        kakao_auth_base_url=os.getenv("KAKAO_AUTH_BASE_URL", "https://kauth.kakao.com"),
        cors_allowed_origins=_split_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        upstream_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10")),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "true").lower() == "true",
    )

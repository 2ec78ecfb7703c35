from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Backend selection
    STORAGE_BACKEND: str = "memory"  # memory | local | s3

    # Local backend settings
    LOCAL_STORAGE_PATH: str = "data/objstore"

    # S3 settings
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    S3_ENDPOINT_URL: str | None = None  # MinIO / LocalStack
    S3_CREATE_BUCKETS: bool = True
    S3_DOWNLOAD_TIMEOUT_SECONDS: float = 120.0
    S3_CONNECT_TIMEOUT_SECONDS: float = 10.0
    S3_READ_TIMEOUT_SECONDS: float = 60.0
    S3_MULTIPART_THRESHOLD_MB: int = 8
    S3_MULTIPART_CHUNK_SIZE_MB: int = 8

    # Compression settings
    COMPRESSION_LEVEL: int = -1  # zlib default

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Read .env as well as the environment; variables not declared here are ignored
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

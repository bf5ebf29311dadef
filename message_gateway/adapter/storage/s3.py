from io import BytesIO

from minio import Minio

from message_gateway.common.config import Settings


class S3ImageStore:
    def __init__(self, settings: Settings, client: Minio | None = None):
        self.settings = settings
        self.bucket_name = settings.aws_s3_bucket_name
        self._client = client

    @property
    def client(self) -> Minio:
        # Built on first use so a bad endpoint fails inside the upload, not at wiring time.
        if self._client is None:
            self._client = Minio(
                self.settings.s3_endpoint,
                access_key=self.settings.aws_access_key_id,
                secret_key=self.settings.aws_secret_access_key,
                region=self.settings.aws_region or None,
                secure=True,
            )
        return self._client

    def put(self, key: str, data: bytes, content_type: str) -> None:
        # No per-object ACL; visibility comes from the bucket policy.
        self.client.put_object(
            self.bucket_name,
            key,
            BytesIO(data),
            len(data),
            content_type=content_type,
        )

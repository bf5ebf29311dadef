import pytest

from message_gateway.service.upload.image import (
    MAX_IMAGE_BYTES,
    Accepted,
    Rejected,
    generate_storage_key,
    public_url,
    validate_image,
)


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("a.jpg", "image/jpeg"),
        ("a.JPEG", "image/jpeg"),
        ("a.png", "image/png"),
        ("a.gif", "image/gif"),
    ],
)
def test_allowed_images_are_accepted(filename: str, content_type: str) -> None:
    verdict = validate_image(filename, content_type, 10)

    assert isinstance(verdict, Accepted)
    assert filename.endswith(verdict.extension)


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("a.webp", "image/webp"),
        ("a.png", "text/plain"),
        ("a.txt", "image/png"),
        ("noext", "image/png"),
        ("a.png", None),
    ],
)
def test_either_check_failing_rejects(filename: str, content_type: str | None) -> None:
    assert validate_image(filename, content_type, 10) == Rejected("Only images are allowed")


def test_size_limit_is_checked_first() -> None:
    assert validate_image("a.png", "image/png", MAX_IMAGE_BYTES + 1) == Rejected("File too large")
    assert isinstance(validate_image("a.png", "image/png", MAX_IMAGE_BYTES), Accepted)


def test_storage_key_format() -> None:
    assert generate_storage_key(".png", now_ms=1700000000000, rand=42) == "1700000000000-42.png"


def test_storage_keys_rarely_collide_within_one_millisecond() -> None:
    # Worst case: every key shares the same timestamp; expected collisions ~0.05.
    keys = {generate_storage_key(".jpg", now_ms=1700000000000) for _ in range(10_000)}

    assert len(keys) >= 9_998


def test_public_url_is_virtual_hosted_style() -> None:
    assert (
        public_url("bucket", "us-east-1", "1-2.gif")
        == "https://bucket.s3.us-east-1.amazonaws.com/1-2.gif"
    )

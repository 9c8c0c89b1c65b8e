import hashlib

import pytest

from hekayaty.endpoints.cloudinary import sign_params
from hekayaty.errors import ValidationFailed
from hekayaty.services.media_service import MediaService
from hekayaty.api.v1.pdf_proxy import host_allowed


def test_image_upload(client, fakes):
    response = client.post(
        "/upload",
        files={"file": ("cover.png", b"png-bytes", "image/png")},
        data={"folder": "covers"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "url": "https://res.cloudinary.com/demo/hekayaty/covers/cover.png",
        "publicId": "hekayaty/covers/cover.png",
        "resourceType": "image",
        "format": "png",
    }


def test_pdf_upload_goes_to_documents(client, fakes):
    response = client.post("/upload", files={"file": ("book.pdf", b"%PDF-1.4", "application/pdf")})

    assert response.status_code == 200
    assert response.json()["resourceType"] == "raw"
    assert fakes.media.uploads == [
        {"filename": "book.pdf", "content_type": "application/pdf", "folder": "documents/uploads"}
    ]


def test_disallowed_type_is_rejected_before_upload(client, fakes):
    response = client.post("/upload", files={"file": ("notes.txt", b"hello", "text/plain")})

    assert response.status_code == 400
    assert response.json() == {"error": "File type not supported"}
    assert fakes.media.uploads == []


def test_missing_file(client, fakes):
    response = client.post("/upload", data={"folder": "covers"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file provided"}


def test_pdf_without_credentials(client, fakes):
    fakes.media.pdf_configured = False

    response = client.post("/upload", files={"file": ("book.pdf", b"%PDF-1.4", "application/pdf")})

    assert response.status_code == 500
    assert response.json() == {"error": "PDF upload configuration missing"}


def test_host_failure_passes_details(client, fakes):
    fakes.media.fail_with = {"error": {"message": "Invalid upload preset"}}

    response = client.post("/upload", files={"file": ("cover.png", b"png-bytes", "image/png")})

    assert response.status_code == 500
    assert response.json() == {"error": "Upload failed", "details": {"error": {"message": "Invalid upload preset"}}}


def test_size_limit():
    MediaService.validate("image/png", 50 * 1024 * 1024)

    with pytest.raises(ValidationFailed) as exc_info:
        MediaService.validate("image/png", 50 * 1024 * 1024 + 1)
    assert exc_info.value.message == "File too large (max 50MB)"


def test_sign_params_sorts_keys_and_appends_secret():
    expected = hashlib.sha1(b"folder=documents/uploads&timestamp=1700000000s3cr3t").hexdigest()

    assert sign_params({"timestamp": 1700000000, "folder": "documents/uploads"}, "s3cr3t") == expected
    assert sign_params({"folder": "documents/uploads", "timestamp": 1700000000}, "s3cr3t") == expected
    assert len(expected) == 40


def test_pdf_proxy_requires_url(client):
    response = client.get("/pdf-proxy")

    assert response.status_code == 400
    assert response.json() == {"error": "PDF URL is required"}


def test_pdf_proxy_streams_inline(client, fakes):
    url = "https://res.cloudinary.com/demo/raw/upload/book.pdf"

    response = client.get("/pdf-proxy", params={"url": url})

    assert response.status_code == 200
    assert response.content == b"%PDF-1.4 fake"
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "inline"
    assert response.headers["cache-control"] == "public, max-age=3600"
    assert "access-control-allow-origin" in response.headers
    assert fakes.media.fetched == [url]


def test_pdf_proxy_passes_upstream_status(client, fakes):
    fakes.media.fetch_result = (404, b"missing")

    response = client.get("/pdf-proxy", params={"url": "https://res.cloudinary.com/demo/gone.pdf"})

    assert response.status_code == 404
    assert response.json() == {"error": "Failed to fetch PDF"}


def test_pdf_proxy_rejects_foreign_hosts(client, fakes):
    response = client.get("/pdf-proxy", params={"url": "http://169.254.169.254/latest/meta-data"})

    assert response.status_code == 400
    assert fakes.media.fetched == []


def test_host_allowed():
    allowed = ["res.cloudinary.com"]

    assert host_allowed("https://res.cloudinary.com/x.pdf", allowed)
    assert host_allowed("https://eu.res.cloudinary.com/x.pdf", allowed)
    assert not host_allowed("https://res.cloudinary.com.evil.io/x.pdf", allowed)
    assert not host_allowed("ftp://res.cloudinary.com/x.pdf", allowed)
    assert host_allowed("https://anything.example.com/x.pdf", [])

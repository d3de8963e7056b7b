"""
Tests for the placeholder document scanner and image payload decoding.
"""
import base64
import random

import pytest

from aura.exceptions import MalformedUploadError
from aura.services.scan.document_scan import (
    DOCUMENT_CATALOG,
    DocumentScanStub,
    decode_image_payload,
)

CATALOG_TYPES = {profile.document_type for profile in DOCUMENT_CATALOG}


class TestDocumentScanStub:
    """Test canned scan results."""

    def test_results_stay_within_catalog_and_range(self):
        scanner = DocumentScanStub(random.Random(42))

        results = [scanner.scan(b"\x89PNG fake image bytes") for _ in range(200)]

        assert {r.document_type for r in results} <= CATALOG_TYPES
        assert all(70 <= r.confidence_percent <= 100 for r in results)
        # uniform choice over 3 profiles: 200 draws cover the catalog
        assert {r.document_type for r in results} == CATALOG_TYPES

    def test_result_ignores_input_content(self):
        first = DocumentScanStub(random.Random(3)).scan(b"a")
        second = DocumentScanStub(random.Random(3)).scan(b"completely different bytes")
        assert first == second

    def test_derived_voice_fields(self):
        result = DocumentScanStub(random.Random(1)).scan(b"img")
        assert result.summary.startswith(f"I've analyzed this {result.document_type.lower()}.")
        assert result.voice_response.endswith("...")

    def test_empty_payload_rejected(self):
        with pytest.raises(MalformedUploadError):
            DocumentScanStub().scan(b"")

    def test_key_points_are_copies(self):
        result = DocumentScanStub(random.Random(5)).scan(b"img")
        result.key_points.append("mutated")
        assert all("mutated" not in p.key_points for p in DOCUMENT_CATALOG)


class TestDecodeImagePayload:
    """Test base64 decoding of camera snapshots."""

    def test_plain_base64(self):
        encoded = base64.b64encode(b"jpeg-bytes").decode()
        assert decode_image_payload(encoded) == b"jpeg-bytes"

    def test_data_url(self):
        encoded = "data:image/jpeg;base64," + base64.b64encode(b"jpeg-bytes").decode()
        assert decode_image_payload(encoded) == b"jpeg-bytes"

    @pytest.mark.parametrize("payload", [None, "", "not base64 at all!", "data:image/png;base64,"])
    def test_malformed(self, payload):
        with pytest.raises(MalformedUploadError):
            decode_image_payload(payload)

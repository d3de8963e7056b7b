from .document_scan import DocumentScanStub, ScanResult, decode_image_payload

__all__ = ["DocumentScanStub", "ScanResult", "decode_image_payload"]

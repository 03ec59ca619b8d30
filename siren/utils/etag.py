import hashlib
from typing import Any, Mapping, Union

from fastapi import Request, Response

from siren.config.settings import settings
from siren.models.root import Root
from siren.services.json_codec import write_text


def generate_etag(data: Union[Root, Mapping[str, Any]]) -> str:
    """
    Generate an ETag for a Siren document.

    The hash covers the JSON text, so two documents that serialize
    identically share an ETag regardless of how they were built.
    """
    raw = data.to_raw() if isinstance(data, Root) else data
    content = write_text(raw)

    # Create MD5 hash of the content
    etag_hash = hashlib.md5(content.encode('utf-8')).hexdigest()
    if settings.ETAG_WEAK:
        return f'W/"{etag_hash}"'
    return f'"{etag_hash}"'


def check_etag_match(request: Request, current_etag: str) -> bool:
    """
    Check the If-None-Match header against the current ETag.

    If-None-Match uses weak comparison (RFC 9110 section 13.1.2): a ``W/``
    prefix on either side is ignored, so a weak tag from a client still
    matches the strong tag of an unchanged document and vice versa.
    """
    if_none_match = request.headers.get('if-none-match')
    if not if_none_match:
        return False

    client_etags = [etag.strip() for etag in if_none_match.split(',')]
    if '*' in client_etags:
        return True

    opaque = _opaque_tag(current_etag)
    return any(_opaque_tag(etag) == opaque for etag in client_etags)


def _opaque_tag(etag: str) -> str:
    return etag[2:] if etag.startswith('W/') else etag


def set_etag_headers(response: Response, etag: str) -> None:
    """
    Set ETag and Cache-Control headers on the response.
    """
    response.headers['ETag'] = etag
    response.headers['Cache-Control'] = 'private, max-age=0, must-revalidate'


def handle_conditional_request(request: Request, data: Union[Root, Mapping[str, Any]]) -> tuple[str, bool]:
    """
    Handle conditional requests with ETag support.

    Returns:
        tuple: (etag, should_return_304)
            - etag: The generated ETag for the document
            - should_return_304: True if should return 304 Not Modified
    """
    current_etag = generate_etag(data)
    return current_etag, check_etag_match(request, current_etag)

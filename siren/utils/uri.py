"""Syntax check for URI references (RFC 3986)."""
from __future__ import annotations

import re
from typing import Any, Optional

from siren.errors import InvalidUriError, TypeMismatchError

# RFC 3986, appendix B
_SPLIT_RE = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.S)

_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
_PCHAR = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@]|{_PCT_ENCODED})"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_USERINFO_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT_ENCODED})*$")
_REG_NAME_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT_ENCODED})*$")
_IP_LITERAL_RE = re.compile(r"^\[[0-9A-Fa-f:.]+\]$|^\[v[0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+\]$")
_PORT_RE = re.compile(r"^[0-9]*$")
_PATH_RE = re.compile(rf"^(?:{_PCHAR}|/)*$")
_QUERY_RE = re.compile(rf"^(?:{_PCHAR}|[/?])*$")


def _check_authority(authority: str) -> Optional[str]:
    userinfo, _, hostport = authority.rpartition("@")
    if userinfo and not _USERINFO_RE.match(userinfo):
        return "illegal character in user info"

    if hostport.startswith("["):
        host, _, rest = hostport.partition("]")
        host += "]"
        if rest and not rest.startswith(":"):
            return "illegal character in authority"
        port = rest[1:]
        if not _IP_LITERAL_RE.match(host):
            return "malformed IP literal"
    else:
        host, _, port = hostport.partition(":")
        if not _REG_NAME_RE.match(host):
            return "illegal character in hostname"

    if not _PORT_RE.match(port):
        return "illegal character in port"
    return None


def uri_syntax_error(value: str) -> Optional[str]:
    """Describe why ``value`` is not a URI reference, or ``None`` when it is one."""
    scheme, authority, path, query, fragment = _SPLIT_RE.match(value).groups()

    if scheme is not None and not _SCHEME_RE.match(scheme):
        return "illegal character in scheme name"
    if scheme is None and authority is None:
        first_segment = path.split("/", 1)[0]
        if ":" in first_segment:
            return "expected scheme name at index 0"
    if authority is not None:
        problem = _check_authority(authority)
        if problem:
            return problem
        if path and not path.startswith("/"):
            return "path must be absolute when an authority is present"
    if not _PATH_RE.match(path):
        return "illegal character in path"
    if query is not None and not _QUERY_RE.match(query):
        return "illegal character in query"
    if fragment is not None and not _QUERY_RE.match(fragment):
        return "illegal character in fragment"
    return None


def parse_href(value: Any, owner: str) -> str:
    """Validate an href attribute for ``owner`` and return it unchanged."""
    if not isinstance(value, str):
        raise TypeMismatchError(
            f"{owner}.href: expected string, found {type(value).__name__}"
        )
    problem = uri_syntax_error(value)
    if problem:
        raise InvalidUriError(value, problem, owner=owner)
    return value

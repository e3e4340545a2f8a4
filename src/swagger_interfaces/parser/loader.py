"""Fetch or read a Swagger document.

Local files are parsed with YAML (which also accepts JSON); URLs are
fetched with httpx, sending the project's API key when one is configured.
"""

import json
from pathlib import Path

import httpx
import yaml

from swagger_interfaces.errors import DocumentError

DEFAULT_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_document(source: str | Path, api_key: str | None = None) -> dict:
    """Load a Swagger document from a file path or an http(s) URL."""
    if isinstance(source, str) and is_url(source):
        text = _fetch(source, api_key)
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentError(f"Cannot read {source}: {e}") from e
    return parse_document(text, str(source))


def parse_document(text: str, origin: str = "<document>") -> dict:
    """Parse document text and check that it has a paths mapping."""
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        # Try JSON specifically (tab-indented JSON is not valid YAML)
        try:
            doc = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            raise DocumentError(f"{origin} is not valid JSON or YAML: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentError(f"{origin} is not a Swagger document")
    if not isinstance(doc.get("paths"), dict):
        raise DocumentError(f"{origin} has no 'paths' mapping")
    return doc


def _fetch(url: str, api_key: str | None) -> str:
    headers = {"apiKey": api_key} if api_key else {}
    try:
        response = httpx.get(url, headers=headers, timeout=DEFAULT_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DocumentError(f"{url} returned {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise DocumentError(f"Cannot fetch {url}: {e}") from e
    return response.text

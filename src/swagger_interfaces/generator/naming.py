"""Turn operation identifiers into interface names.

camel_case follows lodash's word splitting for ASCII identifiers:
apostrophes are dropped, and words break on any other non-alphanumeric
character, on lower-to-upper transitions, at the end of an acronym
("XMLHttp" -> "XML", "Http") and between letters and digits. Non-ASCII
letters are not part of any word.
"""

import re

_WORD_RE = re.compile(
    r"[A-Z]+(?=[A-Z][a-z])"  # acronym followed by a capitalised word
    r"|[A-Z]?[a-z]+"
    r"|[A-Z]+"
    r"|[0-9]+"
)
_APOSTROPHE_RE = re.compile(r"['\u2019]")


def split_words(text: str) -> list[str]:
    """Split an identifier into its words."""
    return _WORD_RE.findall(_APOSTROPHE_RE.sub("", text))


def camel_case(text: str) -> str:
    """Convert text to camelCase: 'get_user-by ID' -> 'getUserById'."""
    words = [w.lower() for w in split_words(text)]
    if not words:
        return ""
    return words[0] + "".join(w.capitalize() for w in words[1:])


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_interface_name(raw: str) -> str:
    """Format an operation identifier as an interface name: 'getUser' -> 'GetUser'.

    No uniqueness is guaranteed; see validator.find_collisions.
    """
    return upper_first(camel_case(raw))


def nested_interface_name(outer: str, field: str) -> str:
    """Name the interface for a nested field: ('GetUser', 'address') -> 'GetUserAddress'."""
    return format_interface_name(f"{outer} {field}")

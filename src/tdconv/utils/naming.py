"""Identifier case conversion used by the code formatters."""

import re

# Initialisms Go code conventionally keeps upper-cased (golint's list).
GO_INITIALISMS = frozenset(
    {
        "ACL",
        "API",
        "ASCII",
        "CPU",
        "CSS",
        "DNS",
        "EOF",
        "GUID",
        "HTML",
        "HTTP",
        "HTTPS",
        "ID",
        "IP",
        "JSON",
        "LHS",
        "QPS",
        "RAM",
        "RHS",
        "RPC",
        "SLA",
        "SMTP",
        "SQL",
        "SSH",
        "TCP",
        "TLS",
        "TTL",
        "UDP",
        "UI",
        "UID",
        "UUID",
        "URI",
        "URL",
        "UTF8",
        "VM",
        "XML",
        "XMPP",
        "XSRF",
        "XSS",
    }
)

_SEPARATORS = re.compile(r"[\s_\-\.]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def split_words(name: str) -> list[str]:
    """Split snake_case, kebab-case, spaced or camelCase text into words."""
    name = _CAMEL_BOUNDARY.sub(r"\1 \2", name.strip())
    return [w for w in _SEPARATORS.split(name) if w]


def to_camel(name: str) -> str:
    """'user_name' -> 'UserName'."""
    return "".join(w[:1].upper() + w[1:].lower() for w in split_words(name))


def to_lower_camel(name: str) -> str:
    """'user_name' -> 'userName'."""
    words = split_words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])


def to_go_name(name: str, exported: bool = True) -> str:
    """Build a Go identifier, keeping well-known initialisms upper-cased.

    The first word of an unexported name stays lower case even when it is
    an initialism ('id_list' -> 'idList').
    """
    words = split_words(name)
    parts = []
    for i, word in enumerate(words):
        if i == 0 and not exported:
            parts.append(word.lower())
        elif word.upper() in GO_INITIALISMS:
            parts.append(word.upper())
        else:
            parts.append(word[:1].upper() + word[1:].lower())
    return "".join(parts)

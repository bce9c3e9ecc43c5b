"""Host parsing — root domain, sld label, initial letter, gradient split.

The root domain is approximated with a fixed set of country-style
second-level labels (``example.co.uk``, ``shop.com.vn``) instead of a
full public-suffix list.

INVARIANT: Nothing here raises. Absent or malformed input degrades to
``"localhost"`` / ``"X"`` so a request always renders something.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_HOST = "localhost"
DEFAULT_LETTER = "X"

SECOND_LEVEL_LABELS: frozenset[str] = frozenset(
    {"co", "com", "net", "org", "gov", "edu", "ac", "mil", "go", "ne", "or"}
)

GRADIENT_SUFFIXES: frozenset[str] = frozenset(
    {"io", "net", "com", "ai", "app", "dev", "co", "me", "gg", "org", "vn"}
)

_PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)
_PATH_RE = re.compile(r"[/?#]")
_ALNUM_RE = re.compile(r"[a-z0-9]", re.IGNORECASE)


@dataclass(frozen=True)
class DomainParts:
    """A domain split into a flat-colored ``main`` and a gradient ``suffix``."""

    main: str
    suffix: str = ""


@dataclass(frozen=True)
class DomainLayout:
    """Length-bucketed sizing policy for the banner's domain line."""

    tracking_em: float
    min_size: int
    max_size: int


def normalize_host(raw: str | None) -> str:
    """Strip protocol, ``www.``, path, query, fragment, and port; lower-case.

    Examples:
        >>> normalize_host("https://www.Example.com:8080/path?q=1")
        'example.com'
        >>> normalize_host(None)
        'localhost'
    """
    text = (raw or DEFAULT_HOST).strip()
    text = _PROTOCOL_RE.sub("", text)
    text = _WWW_RE.sub("", text)
    text = _PATH_RE.split(text, maxsplit=1)[0]
    return text.split(":", 1)[0].strip().lower()


def root_domain(value: str | None) -> str:
    """Return the registrable domain for *value*, dropping subdomains.

    Examples:
        >>> root_domain("www.shop.example.co.uk")
        'example.co.uk'
        >>> root_domain("a.b.example.com")
        'example.com'
        >>> root_domain("")
        'localhost'
    """
    labels = [label for label in normalize_host(value).split(".") if label]
    if len(labels) <= 2:
        return ".".join(labels) or DEFAULT_HOST
    last, second, third = labels[-1], labels[-2], labels[-3]
    if second in SECOND_LEVEL_LABELS and third:
        return f"{third}.{second}.{last}"
    return f"{second}.{last}"


def sld_label(value: str | None) -> str:
    """First dot-separated component of :func:`root_domain`."""
    return root_domain(value).split(".", 1)[0]


def first_letter_of_domain(value: str | None) -> str:
    """First alphanumeric character of the sld label, upper-cased (``"X"`` if none)."""
    match = _ALNUM_RE.search(sld_label(value))
    return match.group(0).upper() if match else DEFAULT_LETTER


def split_domain_for_gradient(domain: str) -> DomainParts:
    """Split a recognized trailing label off *domain* for gradient coloring.

    The dot stays with ``main`` so the two runs can be drawn back to back.

    Examples:
        >>> split_domain_for_gradient("netproxy.io")
        DomainParts(main='netproxy.', suffix='io')
        >>> split_domain_for_gradient("my-brand.xyz")
        DomainParts(main='my-brand.xyz', suffix='')
    """
    i = domain.rfind(".")
    if i <= 0 or i == len(domain) - 1:
        return DomainParts(main=domain)
    suffix = domain[i + 1 :]
    if suffix.lower() in GRADIENT_SUFFIXES:
        return DomainParts(main=domain[: i + 1], suffix=suffix)
    return DomainParts(main=domain)


def domain_layout(domain: str) -> DomainLayout:
    """Pick tracking and size bounds from the sld length.

    Long labels get tighter tracking and smaller bounds so they stay on one
    line; short labels are allowed to render large.
    """
    length = len(sld_label(domain).upper())
    if length >= 14:
        return DomainLayout(tracking_em=0.010, min_size=64, max_size=540)
    if length >= 11:
        return DomainLayout(tracking_em=0.014, min_size=80, max_size=620)
    return DomainLayout(tracking_em=0.018, min_size=110, max_size=720)

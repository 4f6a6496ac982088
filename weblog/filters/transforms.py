"""Built-in text transforms.

Each transform is a pure ``str -> str`` function. ``None`` or empty input
always yields an empty string.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction
import markdown as _markdown


def markdown(text: str | None) -> str:
    """Convert markdown to HTML, smartifying punctuation in the same pass."""
    if not text:
        return ""
    return _markdown.markdown(text, extensions=["smarty"], output_format="html")


def html(text: str | None) -> str:
    return text or ""


# Sanitization ---------------------------------------------------------------

_DROPPED_TAGS = [
    "script",
    "object",
    "embed",
    "applet",
    "iframe",
    "frame",
    "frameset",
    "style",
    "noscript",
    "template",
    "base",
    "link",
    "meta",
    "form",
    "input",
    "button",
    "textarea",
    "select",
    "svg",
    "math",
]

_ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "blockquote",
        "br",
        "cite",
        "code",
        "dd",
        "del",
        "dfn",
        "dl",
        "dt",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "kbd",
        "li",
        "ol",
        "p",
        "pre",
        "q",
        "s",
        "samp",
        "small",
        "strike",
        "strong",
        "sub",
        "sup",
        "tt",
        "u",
        "ul",
        "var",
    }
)

_ALLOWED_ATTRIBUTES = {
    "a": {"href", "title", "rel"},
    "img": {"src", "alt", "title", "width", "height"},
    "abbr": {"title"},
    "acronym": {"title"},
    "blockquote": {"cite"},
    "q": {"cite"},
    "del": {"cite", "datetime"},
    "ins": {"cite", "datetime"},
    "ol": {"start"},
}

_URL_ATTRIBUTES = frozenset({"href", "src", "cite"})
_ALLOWED_SCHEMES = frozenset({"http", "https", "mailto", "ftp"})
_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.\-]*):")
_URL_NOISE_RE = re.compile(r"[\x00-\x20\x7f]+")
_PRUNED_STRINGS = (Comment, Doctype, Declaration, ProcessingInstruction, CData)


def sanitize(text: str | None) -> str:
    """Strip markup outside a fixed allow-list from an HTML fragment.

    Script-capable elements are removed with their content. Other unknown
    elements are unwrapped so their text survives. Attributes outside the
    per-tag allow-list, event handlers and non-web URL schemes are dropped.
    """
    if not text:
        return ""
    soup = BeautifulSoup(text, "html.parser")

    for node in soup.find_all(string=lambda s: isinstance(s, _PRUNED_STRINGS)):
        node.extract()

    for tag in soup.find_all(_DROPPED_TAGS):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in _ALLOWED_TAGS:
            tag.unwrap()
            continue
        allowed = _ALLOWED_ATTRIBUTES.get(tag.name, set())
        tag.attrs = {
            key: value
            for key, value in tag.attrs.items()
            if key in allowed and _is_safe_attribute(key, value)
        }

    return str(soup)


def _is_safe_attribute(name: str, value: object) -> bool:
    if name not in _URL_ATTRIBUTES:
        return True
    if not isinstance(value, str):
        return False
    normalized = _URL_NOISE_RE.sub("", value).lower()
    match = _SCHEME_RE.match(normalized)
    if match is None:
        return True
    return match.group(1) in _ALLOWED_SCHEMES


# Smartification -------------------------------------------------------------

_TOKEN_RE = re.compile(r"(<!--.*?-->|<[a-zA-Z/!][^>]*>)", re.DOTALL)
_TAG_NAME_RE = re.compile(r"^<\s*(/)?\s*([a-zA-Z][a-zA-Z0-9]*)")
_PRESERVE_TAGS = frozenset({"pre", "code", "kbd", "script", "style", "math"})
_ELLIPSIS_RE = re.compile(r"\.\.\.|\. \. \.")
_OPENING_CONTEXT = "([{-–—"
_DASH_ENTITIES = ("&mdash;", "&ndash;")


def smartify(text: str | None) -> str:
    """Replace straight quotes, dashes and ellipses with typographic entities.

    Tags pass through untouched, as does anything inside pre, code, kbd,
    script, style or math elements.
    """
    if not text:
        return ""
    out: list[str] = []
    preserve_depth = 0
    prev_char = ""
    for token in _TOKEN_RE.split(text):
        if not token:
            continue
        if token.startswith("<"):
            match = _TAG_NAME_RE.match(token)
            if match and match.group(2).lower() in _PRESERVE_TAGS and not token.endswith("/>"):
                if match.group(1):
                    preserve_depth = max(0, preserve_depth - 1)
                else:
                    preserve_depth += 1
            out.append(token)
            continue
        if preserve_depth:
            out.append(token)
        else:
            out.append(_educate(token, prev_char))
        prev_char = token[-1]
    return "".join(out)


def _educate(text: str, prev_char: str) -> str:
    text = _ELLIPSIS_RE.sub("&hellip;", text)
    text = text.replace("---", "&mdash;").replace("--", "&ndash;")
    text = text.replace("``", "&ldquo;").replace("''", "&rdquo;")
    return _educate_quotes(text, prev_char)


def _educate_quotes(text: str, prev_char: str) -> str:
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch not in "'\"":
            out.append(ch)
            continue
        before = text[i - 1] if i else prev_char
        after = text[i + 1] if i + 1 < len(text) else ""
        opening = (
            not before
            or before.isspace()
            or before in _OPENING_CONTEXT
            or text[:i].endswith(_DASH_ENTITIES)
        )
        if ch == "'":
            if opening and not after.isspace() and not after.isdigit():
                out.append("&lsquo;")
            else:
                out.append("&rsquo;")
        elif opening and not after.isspace():
            out.append("&ldquo;")
        else:
            out.append("&rdquo;")
    return "".join(out)

"""Tokenizer and renderer for layout/page template text."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Sequence, Union

from apps.cms.content.tags import get_tag
from apps.cms.exceptions import UnknownTagError

log = logging.getLogger(__name__)

Token = Union[str, Dict[str, str]]

TAG_RE = re.compile(r"\{\{\s*cms:(?P<tag_class>[\w/-]+)(?P<tag_params>.*?)\}\}", re.DOTALL)


def tokenize(text: str | None) -> List[Token]:
    """Split ``text`` into plain strings and tag dicts.

    Tag dicts carry ``tag_class``, ``tag_params`` (stripped) and the matched
    ``source``.
    """

    tokens: List[Token] = []
    text = text or ""
    pos = 0
    for match in TAG_RE.finditer(text):
        if match.start() > pos:
            tokens.append(text[pos:match.start()])
        tokens.append(
            {
                "tag_class": match.group("tag_class"),
                "tag_params": match.group("tag_params").strip(),
                "source": match.group(0),
            }
        )
        pos = match.end()
    if pos < len(text):
        tokens.append(text[pos:])
    return tokens


def render(tokens: Sequence[Token], context: Mapping[str, Any] | None = None) -> str:
    context = context or {}
    out: List[str] = []
    for token in tokens:
        if isinstance(token, str):
            out.append(token)
            continue
        kind = get_tag(token["tag_class"])
        if kind is None:
            log.debug("Unknown tag in content: %s", token.get("source"))
            raise UnknownTagError(token["tag_class"])
        out.append(kind.render(token.get("tag_params", ""), context))
    return "".join(out)

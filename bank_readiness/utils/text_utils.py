"""Text matching helpers shared by the scoring stages"""

from typing import Iterable, List, Optional


def find_keyword(text: str, keywords: Iterable[str]) -> Optional[str]:
    """Return the first keyword contained in text (case-insensitive), or None"""
    text_lower = (text or "").lower()
    for keyword in keywords:
        if keyword and keyword.lower() in text_lower:
            return keyword
    return None


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match against a keyword list"""
    return find_keyword(text, keywords) is not None


def unique_tags(tags: Iterable[Optional[str]], limit: int | None = None) -> List[str]:
    """De-duplicate tags keeping first-seen order, dropping empty values"""
    seen = set()
    result = []
    for tag in tags:
        if not tag or tag in seen:
            continue
        seen.add(tag)
        result.append(tag)
    return result[:limit] if limit is not None else result

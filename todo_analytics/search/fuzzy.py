"""Subsequence fuzzy matching."""

EXACT_MATCH_SCORE = 1000
SUBSTRING_SCORE = 500
CHAR_SCORE = 10
CONSECUTIVE_BONUS = 5


def fuzzy_matches(query: str, text: str) -> bool:
    """True if text contains query, or query's characters in order."""
    if not query or not text:
        return False

    query = query.lower()
    text = text.lower()

    if query in text:
        return True

    query_index = 0
    for char in text:
        if query_index == len(query):
            break
        if char == query[query_index]:
            query_index += 1

    return query_index == len(query)


def fuzzy_score(query: str, text: str) -> int:
    """Rank how well text matches query; 0 means no match.

    Exact match scores 1000 and substring 500. Otherwise each matched
    character earns 10, and a character extending a run of consecutive
    matches earns an extra 5 per character in the run.
    """
    if not query or not text:
        return 0

    query = query.lower()
    text = text.lower()

    if text == query:
        return EXACT_MATCH_SCORE
    if query in text:
        return SUBSTRING_SCORE

    score = 0
    query_index = 0
    consecutive_matches = 0

    for char in text:
        if query_index == len(query):
            break
        if char == query[query_index]:
            score += CHAR_SCORE
            consecutive_matches += 1
            if consecutive_matches > 1:
                score += consecutive_matches * CONSECUTIVE_BONUS
            query_index += 1
        else:
            consecutive_matches = 0

    return score if query_index == len(query) else 0

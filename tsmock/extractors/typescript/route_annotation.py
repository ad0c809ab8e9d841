from typing import Optional

from tsmock.config.typescript_constants import TypeScriptCommentDelimiters


def strip_comment_delimiters(comment_text: str) -> str:
    """Return the content of a line or block comment without its delimiters."""
    if comment_text.startswith(TypeScriptCommentDelimiters.LINE_COMMENT_START):
        return comment_text[len(TypeScriptCommentDelimiters.LINE_COMMENT_START):]
    if comment_text.startswith(TypeScriptCommentDelimiters.BLOCK_COMMENT_START):
        content = comment_text[len(TypeScriptCommentDelimiters.BLOCK_COMMENT_START):]
        if content.endswith(TypeScriptCommentDelimiters.BLOCK_COMMENT_END):
            content = content[:-len(TypeScriptCommentDelimiters.BLOCK_COMMENT_END)]
        return content
    return comment_text


def parse_route_annotation(comment_text: str, marker: str = "route") -> Optional[str]:
    """
    Read the route path out of a route-annotation comment.

    The comment content is split on whitespace. The first token must contain
    ``marker`` and the second token is returned verbatim as the route path.

    Args:
        comment_text: Raw comment text, delimiters included.
        marker: Substring identifying a route annotation.

    Returns:
        The route path, or None when the comment is not a route annotation.
    """
    tokens = strip_comment_delimiters(comment_text).split()
    if not tokens or marker not in tokens[0]:
        return None
    if len(tokens) < 2:
        return None
    return tokens[1]

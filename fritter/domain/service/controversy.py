"""Controversy classification.

A freet is controversial when it has drawn real engagement and its
dislikes are close to its likes. "Close" is measured against the like
count only, so the rule is deliberately asymmetric.
"""

# A freet needs strictly more likes than this
MIN_LIKES = 100

# |likes - dislikes| must stay below this fraction of likes
PERCENT_DIFF = 0.05


def classify(
    likes: int,
    dislikes: int,
    min_likes: int = MIN_LIKES,
    percent_diff: float = PERCENT_DIFF,
) -> bool:
    """Decide whether a like/dislike tally is controversial.

    Args:
        likes: Number of likes
        dislikes: Number of dislikes
        min_likes: Likes must exceed this floor
        percent_diff: Allowed gap as a fraction of likes

    Returns:
        True if likes > min_likes and |likes - dislikes| < percent_diff * likes
    """
    if likes <= 0:
        return False
    if likes <= min_likes:
        return False
    return abs(likes - dislikes) < percent_diff * likes

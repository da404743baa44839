"""Token reward derivation for a passed course."""


def calculate_reward(base_reward: int, score: int, pass_threshold: int, multiplier: int) -> int:
    """
    Compute the tokens awarded for a passed quiz.

    ``floor(base_reward * score / pass_threshold) * multiplier``, multiplying
    before a single floor division. ``pass_threshold`` is always positive
    (guaranteed by the config store).

    Args:
        base_reward: Course base reward
        score: Achieved quiz score (>= pass_threshold)
        pass_threshold: Course pass threshold
        multiplier: Global reward multiplier

    Returns:
        Integer token amount
    """
    adjusted = (base_reward * score) // pass_threshold
    return adjusted * multiplier

"""
Global pytest configuration and shared fixtures.

Distributors are built from the in-memory collaborators or from Mocks so
tests never depend on external services.
"""

import pytest
from unittest.mock import Mock

from learnreward.rewards.distribution import RewardDistributor
from learnreward.rewards.distribution.collaborators import (
    AnswerKeyQuizScorer,
    InMemoryTokenMinter,
    InMemoryProgressTracker,
)
from learnreward.rewards.distribution.interfaces import QuizScorer, TokenMinter, ProgressTracker
from learnreward.rewards.distribution.models import Result
from learnreward.rewards.distribution.services import SaltedCertIdGenerator

ANSWER_KEY = [0, 1, 2, 3, 0, 1, 2, 3, 0, 1]


@pytest.fixture
def answer_key():
    return list(ANSWER_KEY)


@pytest.fixture
def scorer(answer_key):
    """Answer-key scorer with a key registered for course 1."""
    scorer = AnswerKeyQuizScorer(points_per_correct=10)
    scorer.register_answer_key(1, answer_key)
    return scorer


@pytest.fixture
def minter():
    return InMemoryTokenMinter()


@pytest.fixture
def progress():
    return InMemoryProgressTracker()


@pytest.fixture
def distributor(scorer, minter, progress):
    """Distributor wired to in-memory collaborators, default admin and multiplier 100."""
    return RewardDistributor(
        quiz_scorer=scorer,
        token_minter=minter,
        progress_tracker=progress,
        cert_id_generator=SaltedCertIdGenerator(salt="test"),
    )


@pytest.fixture
def mock_collaborators():
    """Mock collaborators returning success; the scorer reports a score of 80."""
    quiz_scorer = Mock(spec=QuizScorer)
    quiz_scorer.score_quiz.return_value = Result.success(80)
    token_minter = Mock(spec=TokenMinter)
    token_minter.mint.return_value = Result.success()
    progress_tracker = Mock(spec=ProgressTracker)
    progress_tracker.complete_course.return_value = Result.success()
    return {
        'quiz_scorer': quiz_scorer,
        'token_minter': token_minter,
        'progress_tracker': progress_tracker,
    }


@pytest.fixture
def mocked_distributor(mock_collaborators):
    """Distributor wired to Mock collaborators."""
    return RewardDistributor(
        cert_id_generator=SaltedCertIdGenerator(salt="test"),
        **mock_collaborators
    )


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    # Set higher log level to reduce output during tests
    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    # Restore normal logging after tests
    logging.getLogger().setLevel(logging.INFO)

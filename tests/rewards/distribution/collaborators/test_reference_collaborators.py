"""Tests for the in-process reference collaborators."""

import pytest

from learnreward.rewards.distribution.collaborators import (
    AnswerKeyQuizScorer,
    InMemoryTokenMinter,
    InMemoryProgressTracker,
)


class TestAnswerKeyQuizScorer:
    """Test answer-key scoring."""

    def test_scores_correct_answers(self, scorer, answer_key):
        answers = list(answer_key)
        answers[0] = (answers[0] + 1) % 4

        result = scorer.score_quiz(1, answers)

        assert result.ok
        assert result.value == 90

    def test_unknown_course(self, scorer, answer_key):
        result = scorer.score_quiz(99, answer_key)

        assert not result.ok
        assert result.error.reason == "unknown_course"

    def test_answer_count_mismatch(self, scorer, answer_key):
        result = scorer.score_quiz(1, answer_key[:5])

        assert result.error.reason == "answer_count_mismatch"

    def test_rejects_empty_key(self):
        with pytest.raises(ValueError):
            AnswerKeyQuizScorer().register_answer_key(1, [])

    def test_rejects_non_positive_points(self):
        with pytest.raises(ValueError):
            AnswerKeyQuizScorer(points_per_correct=0)


class TestInMemoryTokenMinter:
    """Test minting and the supply cap."""

    def test_mint_updates_balance_and_supply(self):
        minter = InMemoryTokenMinter()

        assert minter.mint("alice", 300).ok
        assert minter.mint("alice", 200).ok

        assert minter.balance_of("alice") == 500
        assert minter.balance_of("bob") == 0
        assert minter.total_supply == 500

    def test_supply_cap(self):
        minter = InMemoryTokenMinter(supply_cap=1000)
        minter.mint("alice", 600)

        result = minter.mint("bob", 500)

        assert result.error.reason == "supply_cap_exceeded"
        assert minter.balance_of("bob") == 0
        assert minter.total_supply == 600

    @pytest.mark.parametrize("amount", [0, -10])
    def test_rejects_non_positive_amount(self, amount):
        assert InMemoryTokenMinter().mint("alice", amount).error.reason == "invalid_amount"


class TestInMemoryProgressTracker:
    """Test progress recording."""

    def test_records_completion_once(self):
        tracker = InMemoryProgressTracker()

        assert tracker.complete_course("alice", 1).ok
        assert tracker.has_completed("alice", 1)
        assert tracker.complete_course("alice", 1).error.reason == "already_recorded"

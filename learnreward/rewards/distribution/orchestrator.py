"""Reward distributor - enrollment and the course completion / reward claim transaction."""

import logging
import threading
from typing import Optional, Sequence
import bittensor as bt

from learnreward.rewards.utils.config import QUIZ_QUESTION_COUNT, EVENTS_LOG_DIR, EVENTS_RETENTION_SIZE
from learnreward.utils.logging import EVENTS_LEVEL_NUM, setup_events_logger

from .interfaces.quiz_scorer import QuizScorer
from .interfaces.token_minter import TokenMinter
from .interfaces.progress_tracker import ProgressTracker
from .interfaces.cert_id_generator import CertIdGenerator
from .models.course_config import CourseRewardConfig
from .models.completion_record import ClaimReceipt, CompletionRecord
from .models.result import CollaboratorError, ErrorKind, Result
from .services.config_store import ConfigStore
from .services.enrollment_ledger import EnrollmentLedger
from .services.completion_ledger import CompletionLedger
from .services.reward_calculator import calculate_reward
from .services.cert_id_generator import SaltedCertIdGenerator
from .services.logical_clock import LogicalClock
from .utils.error_handling import log_failure, log_collaborator_failure, safe_collaborator_call


class RewardDistributor:
    """
    Coordinates the per (user, course) state machine
    NotEnrolled -> Enrolled -> Completed.

    Owns the config store, both ledgers and the minted-total counter. The
    quiz scorer, token minter and progress tracker are referenced, not owned.
    All public operations run under a single re-entrant instance lock, so a
    collaborator may read back through the accessors during a claim.
    """

    def __init__(
        self,
        quiz_scorer: QuizScorer,
        token_minter: TokenMinter,
        progress_tracker: ProgressTracker,
        config_store: ConfigStore = None,
        enrollment_ledger: EnrollmentLedger = None,
        completion_ledger: CompletionLedger = None,
        cert_id_generator: CertIdGenerator = None,
        clock: LogicalClock = None,
        events_logger: Optional[logging.Logger] = None
    ):
        self.quiz_scorer = quiz_scorer
        self.token_minter = token_minter
        self.progress_tracker = progress_tracker
        self.config_store = config_store or ConfigStore()
        self.enrollment_ledger = enrollment_ledger or EnrollmentLedger()
        self.completion_ledger = completion_ledger or CompletionLedger()
        self.cert_id_generator = cert_id_generator or SaltedCertIdGenerator()
        self.clock = clock or LogicalClock()

        if events_logger is None and EVENTS_LOG_DIR:
            events_logger = setup_events_logger(EVENTS_LOG_DIR, EVENTS_RETENTION_SIZE)
        self.events_logger = events_logger

        self._total_rewards_minted = 0
        self._lock = threading.RLock()

    # Administration

    def set_admin(self, caller: str, new_admin: str) -> Result[None]:
        with self._lock:
            result = self.config_store.set_admin(caller, new_admin)
            if result.ok:
                self._emit_event(f"admin_changed by={caller} new_admin={new_admin}")
            return result

    def set_reward_multiplier(self, caller: str, multiplier: int) -> Result[None]:
        with self._lock:
            result = self.config_store.set_reward_multiplier(caller, multiplier)
            if result.ok:
                self._emit_event(f"multiplier_changed by={caller} multiplier={multiplier}")
            return result

    def add_course_reward_config(
        self,
        caller: str,
        course_id: int,
        difficulty: int,
        base_reward: int,
        pass_threshold: int
    ) -> Result[None]:
        with self._lock:
            result = self.config_store.add_course_reward_config(
                caller, course_id, difficulty, base_reward, pass_threshold
            )
            if result.ok:
                self._emit_event(
                    f"course_config_set by={caller} course={course_id} difficulty={difficulty} "
                    f"base_reward={base_reward} pass_threshold={pass_threshold}"
                )
            return result

    # Learner transactions

    def enroll_user(self, caller: str, course_id: int) -> Result[None]:
        """Enroll the caller in a course. Always succeeds; repeat calls are no-ops."""
        with self._lock:
            already_enrolled = self.enrollment_ledger.is_enrolled(caller, course_id)
            result = self.enrollment_ledger.enroll(caller, course_id)
            if not already_enrolled:
                self._emit_event(f"enrolled user={caller} course={course_id}")
            return result

    def complete_course_and_claim(
        self,
        caller: str,
        course_id: int,
        quiz_results: Sequence[int],
        proof: str
    ) -> Result[ClaimReceipt]:
        """
        Verify a quiz submission and, if it passes, mint the reward and record completion.

        Validation (enrollment, prior completion, answer count, proof) runs
        before any collaborator is called. The completion record and the
        minted-total counter are written only after minting and the progress
        update have both succeeded, so a failed call leaves the distributor
        unchanged.

        Args:
            caller: Learner identity
            course_id: Course being completed
            quiz_results: Quiz answers, exactly QUIZ_QUESTION_COUNT of them
            proof: Non-empty completion proof

        Returns:
            Result carrying a ClaimReceipt, or exactly one ErrorKind
        """
        operation = "complete_course_and_claim"
        context = {'caller': caller, 'course_id': course_id, 'proof': proof}

        with self._lock:
            # 1-4. Local validation, no collaborator touched yet
            if not self.enrollment_ledger.is_enrolled(caller, course_id):
                return log_failure(ErrorKind.NOT_ENROLLED, operation, context)

            if self.completion_ledger.is_completed(caller, course_id):
                return log_failure(ErrorKind.ALREADY_COMPLETED, operation, context)

            if len(quiz_results) != QUIZ_QUESTION_COUNT:
                return log_failure(
                    ErrorKind.INVALID_QUIZ_RESULTS,
                    operation,
                    {**context, 'answer_count': len(quiz_results)}
                )

            if not proof:
                return log_failure(ErrorKind.INVALID_PROOF, operation, context)

            # 5. Score the quiz
            score_result = safe_collaborator_call(
                "quiz_scorer", self.quiz_scorer.score_quiz, course_id, list(quiz_results)
            )
            if not score_result.ok:
                return log_collaborator_failure(ErrorKind.QUIZ_FAILED, operation, score_result.error, context)
            score = score_result.value
            if not isinstance(score, int) or isinstance(score, bool):
                return log_collaborator_failure(
                    ErrorKind.QUIZ_FAILED,
                    operation,
                    CollaboratorError("quiz_scorer", "invalid_score", repr(score)),
                    context
                )

            # 6-7. Check against the course config
            config = self.config_store.get_course_reward_config(course_id)
            if config is None:
                return log_failure(ErrorKind.COURSE_NOT_FOUND, operation, context)

            if score < config.pass_threshold:
                return log_failure(
                    ErrorKind.QUIZ_FAILED,
                    operation,
                    {**context, 'score': score, 'pass_threshold': config.pass_threshold}
                )

            # 8. Derive the reward
            multiplier = self.config_store.get_reward_multiplier()
            reward = calculate_reward(config.base_reward, score, config.pass_threshold, multiplier)
            bt.logging.debug(
                f"Course {course_id} reward for {caller}: base={config.base_reward}, score={score}, "
                f"threshold={config.pass_threshold}, multiplier={multiplier} -> {reward}"
            )

            # 9. Mint
            mint_result = safe_collaborator_call("token_minter", self.token_minter.mint, caller, reward)
            if not mint_result.ok:
                return log_collaborator_failure(
                    ErrorKind.TOKEN_MINT_FAILED, operation, mint_result.error, {**context, 'reward': reward}
                )

            # 10. Progress
            progress_result = safe_collaborator_call(
                "progress_tracker", self.progress_tracker.complete_course, caller, course_id
            )
            if not progress_result.ok:
                return log_collaborator_failure(
                    ErrorKind.PROGRESS_UPDATE_FAILED, operation, progress_result.error, context
                )

            # 11-13. Commit: completion record first, then the counter
            cert_id = self.cert_id_generator.next_id()
            timestamp = self.clock.now()

            commit_result = self.completion_ledger.commit(
                caller, course_id, score, timestamp, cert_id, tokens_awarded=reward
            )
            if not commit_result.ok:
                return commit_result

            self._total_rewards_minted += reward

            bt.logging.info(
                f"✅ {caller} completed course {course_id}: score={score}, "
                f"{reward} tokens awarded, certificate {cert_id}"
            )
            self._emit_event(
                f"completed user={caller} course={course_id} score={score} "
                f"tokens={reward} cert={cert_id} timestamp={timestamp}"
            )

            return Result.success(ClaimReceipt(
                tokens_awarded=reward,
                certification_id=cert_id,
                timestamp=timestamp
            ))

    # Read accessors

    def get_total_rewards_minted(self) -> int:
        with self._lock:
            return self._total_rewards_minted

    def get_course_reward_config(self, course_id: int) -> Optional[CourseRewardConfig]:
        with self._lock:
            return self.config_store.get_course_reward_config(course_id)

    def get_user_completion(self, user: str, course_id: int) -> Optional[CompletionRecord]:
        with self._lock:
            return self.completion_ledger.get(user, course_id)

    def is_user_enrolled(self, user: str, course_id: int) -> bool:
        with self._lock:
            return self.enrollment_ledger.is_enrolled(user, course_id)

    def get_reward_multiplier(self) -> int:
        with self._lock:
            return self.config_store.get_reward_multiplier()

    def get_admin(self) -> str:
        with self._lock:
            return self.config_store.get_admin()

    def recompute_total_rewards_minted(self) -> int:
        """
        Re-derive the minted total from the completion ledger.

        The completion ledger is authoritative; the counter is replaced by the
        derived sum.
        """
        with self._lock:
            derived = self.completion_ledger.total_awarded()
            if derived != self._total_rewards_minted:
                bt.logging.warning(
                    f"Minted total drifted: counter={self._total_rewards_minted}, ledger={derived}. "
                    f"Resetting to ledger value"
                )
            self._total_rewards_minted = derived
            return derived

    def _emit_event(self, message: str):
        if self.events_logger is not None:
            self.events_logger.log(EVENTS_LEVEL_NUM, message)

    def __repr__(self) -> str:
        return (
            f"RewardDistributor(enrollments={len(self.enrollment_ledger)}, "
            f"completions={len(self.completion_ledger)}, minted={self._total_rewards_minted})"
        )

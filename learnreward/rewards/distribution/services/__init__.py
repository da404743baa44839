"""Core services for the reward distribution system."""

from .config_store import ConfigStore
from .enrollment_ledger import EnrollmentLedger
from .completion_ledger import CompletionLedger
from .reward_calculator import calculate_reward
from .cert_id_generator import SaltedCertIdGenerator
from .logical_clock import LogicalClock

__all__ = [
    "ConfigStore",
    "EnrollmentLedger",
    "CompletionLedger",
    "calculate_reward",
    "SaltedCertIdGenerator",
    "LogicalClock",
]

"""Tests for the administrator-gated config store."""

import pytest

from learnreward.rewards.distribution.models import ErrorKind
from learnreward.rewards.distribution.services.config_store import ConfigStore

ADMIN = "ST1ADMIN"


@pytest.fixture
def store():
    return ConfigStore(admin=ADMIN, reward_multiplier=100)


class TestAuthorization:
    """Test that every mutation is gated on the administrator."""

    def test_admin_can_set_admin(self, store):
        assert store.set_admin(ADMIN, "ST2ADMIN").ok
        assert store.get_admin() == "ST2ADMIN"
        assert not store.is_admin(ADMIN)

    def test_identity_match_is_exact(self, store):
        """Case or whitespace variations of the admin are not the admin."""
        assert store.set_admin("st1admin", "ST9").error == ErrorKind.NOT_AUTHORIZED
        assert store.set_admin(ADMIN + " ", "ST9").error == ErrorKind.NOT_AUTHORIZED

    def test_authorization_checked_before_value(self, store):
        """A non-admin with an invalid value still gets NotAuthorized."""
        assert store.set_reward_multiplier("ST1USER", 0).error == ErrorKind.NOT_AUTHORIZED
        assert store.add_course_reward_config("ST1USER", 1, 9, 0, 0).error == ErrorKind.NOT_AUTHORIZED


class TestCourseRewardConfig:
    """Test course config validation and upserts."""

    @pytest.mark.parametrize("difficulty", [1, 3, 5])
    def test_accepts_difficulty_in_range(self, store, difficulty):
        assert store.add_course_reward_config(ADMIN, 7, difficulty, 10, 10).ok
        assert store.get_course_reward_config(7).difficulty == difficulty

    @pytest.mark.parametrize("difficulty", [0, 6, -1])
    def test_rejects_difficulty_out_of_range(self, store, difficulty):
        assert store.add_course_reward_config(ADMIN, 7, difficulty, 10, 10).error == ErrorKind.INVALID_DIFFICULTY

    @pytest.mark.parametrize("base_reward, pass_threshold", [(0, 80), (-5, 80), (100, 0), (100, -1)])
    def test_rejects_non_positive_values(self, store, base_reward, pass_threshold):
        result = store.add_course_reward_config(ADMIN, 7, 3, base_reward, pass_threshold)

        assert result.error == ErrorKind.INVALID_VALUE
        assert store.get_course_reward_config(7) is None

    def test_difficulty_checked_before_values(self, store):
        assert store.add_course_reward_config(ADMIN, 7, 6, 0, 0).error == ErrorKind.INVALID_DIFFICULTY

    def test_upsert_overwrites(self, store):
        store.add_course_reward_config(ADMIN, 7, 3, 100, 80)
        store.add_course_reward_config(ADMIN, 7, 4, 200, 60)

        config = store.get_course_reward_config(7)
        assert (config.difficulty, config.base_reward, config.pass_threshold) == (4, 200, 60)

    def test_unknown_course_returns_none(self, store):
        assert store.get_course_reward_config(42) is None


class TestRewardMultiplier:
    """Test reward multiplier updates."""

    def test_default_multiplier(self, store):
        assert store.get_reward_multiplier() == 100

    def test_rejects_negative_multiplier(self, store):
        assert store.set_reward_multiplier(ADMIN, -3).error == ErrorKind.INVALID_VALUE
        assert store.get_reward_multiplier() == 100

    def test_constructor_rejects_non_positive_multiplier(self):
        with pytest.raises(ValueError):
            ConfigStore(admin=ADMIN, reward_multiplier=0)

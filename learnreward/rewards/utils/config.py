import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

__version__ = "0.3.1"

# Administrator and global multiplier applied to a freshly created distributor
ADMIN_PRINCIPAL = os.getenv('ADMIN_PRINCIPAL', 'ST1ADMIN')
REWARD_MULTIPLIER = int(os.getenv('REWARD_MULTIPLIER', '100'))

# Quiz submission rules
QUIZ_QUESTION_COUNT = 10
POINTS_PER_CORRECT_ANSWER = int(os.getenv('POINTS_PER_CORRECT_ANSWER', '10'))

# Course difficulty bounds (inclusive)
MIN_COURSE_DIFFICULTY = 1
MAX_COURSE_DIFFICULTY = 5

# Certificate identifiers
CERT_ID_PREFIX = "CERT-"
CERT_ID_LENGTH = 9
CERT_ID_SALT = os.getenv('CERT_ID_SALT', 'learnreward')

# Audit event log
EVENTS_LOG_DIR = os.getenv('EVENTS_LOG_DIR')
EVENTS_RETENTION_SIZE = int(os.getenv('EVENTS_RETENTION_SIZE', str(10 * 1024 * 1024)))  # 10 MB

# Log out all non-sensitive config variables
bt.logging.info(f"ADMIN_PRINCIPAL: {ADMIN_PRINCIPAL}")
bt.logging.info(f"REWARD_MULTIPLIER: {REWARD_MULTIPLIER}")
bt.logging.info(f"QUIZ_QUESTION_COUNT: {QUIZ_QUESTION_COUNT}")
bt.logging.info(f"POINTS_PER_CORRECT_ANSWER: {POINTS_PER_CORRECT_ANSWER}")
bt.logging.info(f"COURSE_DIFFICULTY_RANGE: [{MIN_COURSE_DIFFICULTY}, {MAX_COURSE_DIFFICULTY}]")
bt.logging.info(f"EVENTS_LOG_DIR: {EVENTS_LOG_DIR}")
bt.logging.info(f"EVENTS_RETENTION_SIZE: {EVENTS_RETENTION_SIZE}")

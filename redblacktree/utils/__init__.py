from .event_logger import EventLogger
from .validation import black_height, check_invariants

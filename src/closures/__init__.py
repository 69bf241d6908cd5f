"""
Closure kata package root.

Seven independent factories, each returning a fresh handle over private
state. No state is shared between handles or kept at module level.
"""

from .counter import Counter, counter
from .lives import LivesTracker, lives
from .messages import MessageEntry, MessageLogger, messages
from .multiply import multiply
from .pocket import Pocket, pocket
from .pricing import PriceCalculator, total
from .settings import LivesSettings, MessageSettings, PocketSettings, Settings, UserSettings
from .user import UserNameStore, user

__all__ = [
    # Factories
    "counter",
    "total",
    "user",
    "lives",
    "messages",
    "pocket",
    "multiply",
    # Handles
    "Counter",
    "PriceCalculator",
    "UserNameStore",
    "LivesTracker",
    "MessageLogger",
    "MessageEntry",
    "Pocket",
    # Settings
    "Settings",
    "UserSettings",
    "LivesSettings",
    "MessageSettings",
    "PocketSettings",
]

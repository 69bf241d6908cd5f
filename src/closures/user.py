import logging
import re
from typing import Optional

from .settings import UserSettings

logger = logging.getLogger(__name__)


class UserNameStore:
    """Holds a single validated user name.

    Invalid names are reported through the boolean result of set_name();
    the previously stored value is kept.
    """

    def __init__(self, settings: Optional[UserSettings] = None) -> None:
        self.settings = settings or UserSettings()
        self._pattern = re.compile(self.settings.name_pattern)
        self._name: Optional[str] = None

    def set_name(self, name: str) -> bool:
        if not isinstance(name, str) or self._pattern.fullmatch(name) is None:
            logger.debug("Rejected user name %r", name)
            return False
        self._name = name
        logger.debug("User name set to %r", name)
        return True

    def get_name(self) -> Optional[str]:
        return self._name


def user(settings: Optional[UserSettings] = None) -> UserNameStore:
    return UserNameStore(settings)

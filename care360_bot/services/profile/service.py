"""
Profile directory backed by the local user list.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from ...config.files import load_users
from ...core.exceptions import ConfigLoadError
from ...core.models.user import UserProfile
from ...utils.logging import get_logger

logger = get_logger("care360.profile")


class ProfileDirectory:
    """Read-only lookup of user profiles by platform account id."""

    def __init__(
        self,
        users: Iterable[UserProfile] = (),
        load_error: Optional[ConfigLoadError] = None,
    ):
        self._by_id: Dict[int, UserProfile] = {}
        for user in users:
            # First entry wins, matching a linear scan of the file
            self._by_id.setdefault(user.user_id, user)
        self.load_error = load_error

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ProfileDirectory":
        """
        Load the user list once.

        A missing or malformed file is not fatal: the error is kept and
        every lookup reports it to the user.
        """
        try:
            users = load_users(path)
        except ConfigLoadError as e:
            logger.error("User list unavailable: %s", e)
            return cls(load_error=e)
        logger.info("Loaded %d user profiles from %s", len(users), path)
        return cls(users)

    @property
    def available(self) -> bool:
        return self.load_error is None

    def get(self, user_id: int) -> Optional[UserProfile]:
        return self._by_id.get(user_id)

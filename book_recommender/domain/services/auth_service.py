"""Authentication service: registration, login and account maintenance."""

import hashlib
import logging
import re
from typing import Optional

from ..entities.user import User
from ..interfaces.entity_store import EntityStore

logger = logging.getLogger(__name__)

EMAIL_RX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
CODICE_FISCALE_RX = re.compile(r"^[A-Za-z0-9]{16}$")
MIN_PASSWORD_LENGTH = 8


def hash_password(plaintext: str) -> str:
    """Return the hex encoded SHA-256 digest of ``plaintext``."""
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def is_strong_password(plaintext: Optional[str]) -> bool:
    """At least eight characters with at least one letter and one digit."""
    if not plaintext or len(plaintext) < MIN_PASSWORD_LENGTH:
        return False
    has_letter = any(ch.isalpha() for ch in plaintext)
    has_digit = any(ch.isdigit() for ch in plaintext)
    return has_letter and has_digit


class AuthService:
    """
    Owns the registered users and the single active session of the process.

    Every operation reloads the users file, so changes made by another
    service instance on the same file are seen. Rule violations are reported
    by returning False; only I/O problems raise.
    """

    def __init__(self, users: EntityStore[User]):
        self._users = users
        self._current_userid: Optional[str] = None

    @property
    def current_userid(self) -> Optional[str]:
        """Userid of the logged in user, or None."""
        return self._current_userid

    @property
    def is_logged_in(self) -> bool:
        return self._current_userid is not None

    def register(self, user: User) -> bool:
        """Add ``user`` unless the userid is already taken."""
        with self._users.edit() as users:
            if any(existing.userid == user.userid for existing in users):
                logger.info(f"Registration rejected: userid {user.userid} already exists")
                return False
            users.append(user)
        logger.info(f"Registered user {user.userid}")
        return True

    def register_account(
        self,
        userid: str,
        password: str,
        nome: str,
        cognome: str,
        codice_fiscale: str,
        email: str,
    ) -> bool:
        """Validate the registration form, hash the password and register.

        Returns:
            bool: False if any field is invalid or the userid is taken.
        """
        userid = (userid or "").strip()
        email = (email or "").strip()
        codice_fiscale = (codice_fiscale or "").strip()
        if not userid or not password:
            logger.info("Registration rejected: userid and password are required")
            return False
        if not EMAIL_RX.match(email):
            logger.info(f"Registration rejected for {userid}: invalid email")
            return False
        if not CODICE_FISCALE_RX.match(codice_fiscale):
            logger.info(f"Registration rejected for {userid}: invalid fiscal code")
            return False
        if not is_strong_password(password):
            logger.info(f"Registration rejected for {userid}: weak password")
            return False

        return self.register(
            User(
                userid=userid,
                password_hash=hash_password(password),
                nome=(nome or "").strip(),
                cognome=(cognome or "").strip(),
                codice_fiscale=codice_fiscale,
                email=email,
            )
        )

    def login(self, userid: str, password: str) -> bool:
        """Open a session for ``userid`` if the password matches.

        An unknown user and a wrong password are indistinguishable.
        """
        user = self.get_user(userid)
        if user is None or user.password_hash != hash_password(password):
            logger.info(f"Login failed for {userid}")
            return False
        self._current_userid = user.userid
        logger.info(f"User {userid} logged in")
        return True

    def logout(self) -> None:
        if self._current_userid is not None:
            logger.info(f"User {self._current_userid} logged out")
        self._current_userid = None

    def get_user(self, userid: str) -> Optional[User]:
        for user in self._users.load_all():
            if user.userid == userid:
                return user
        return None

    def update_user(self, updated: User) -> bool:
        """Replace the stored profile of ``updated.userid``."""
        with self._users.edit() as users:
            for index, user in enumerate(users):
                if user.userid == updated.userid:
                    users[index] = updated
                    break
            else:
                logger.info(f"Profile update rejected: no user {updated.userid}")
                return False
        return True

    def update_password(self, userid: str, new_password: str) -> bool:
        with self._users.edit() as users:
            for index, user in enumerate(users):
                if user.userid == userid:
                    users[index] = user.model_copy(update={"password_hash": hash_password(new_password)})
                    break
            else:
                logger.info(f"Password change rejected: no user {userid}")
                return False
        logger.info(f"Password changed for {userid}")
        return True

    def delete_user(self, userid: str) -> bool:
        """Remove a user; libraries, reviews and suggestions are left in place."""
        with self._users.edit() as users:
            remaining = [user for user in users if user.userid != userid]
            removed = len(remaining) != len(users)
            users[:] = remaining

        if userid == self._current_userid:
            self._current_userid = None
        if removed:
            logger.info(f"Deleted user {userid}")
        return removed

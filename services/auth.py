import hashlib
import hmac
import secrets
import time
from typing import Any, Callable, Dict, Optional, Tuple

from constants import TOKEN_TTL_HOURS
from logging_config import get_logger
from services.resources import utc_now_iso
from store import MockCollection

logger = get_logger(__name__)

PBKDF2_ITERATIONS = 100_000


class AuthError(Exception):
    pass


class DuplicateAccount(ValueError):
    pass


def hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), bytes.fromhex(salt), PBKDF2_ITERATIONS)
    return digest.hex()


def public_account(account: Dict[str, Any]) -> Dict[str, Any]:
    return {k: account[k] for k in ("id", "username", "email", "created_at")}


class AuthService:
    """Authentication stub: accounts live in the mock store, tokens in memory."""

    def __init__(self, store: MockCollection, token_ttl_hours: float = TOKEN_TTL_HOURS, clock: Callable[[], float] = time.time):
        self.store = store
        self.token_ttl = token_ttl_hours * 3600
        self.clock = clock
        # {token: (account id, expires at)}
        self.tokens: Dict[str, Tuple[int, float]] = {}

    def _prune_tokens(self) -> None:
        now = self.clock()
        expired = [token for token, (_, expires_at) in self.tokens.items() if expires_at <= now]
        for token in expired:
            del self.tokens[token]
        if expired:
            logger.debug(f"Dropped {len(expired)} expired token(s)")

    def _issue_token(self, account: Dict[str, Any]) -> Dict[str, Any]:
        self._prune_tokens()
        token = secrets.token_urlsafe(32)
        self.tokens[token] = (account["id"], self.clock() + self.token_ttl)
        return {"token": token, "user": public_account(account)}

    def _account_id(self, token: Optional[str]) -> Optional[int]:
        entry = self.tokens.get(token) if token else None
        if entry is None:
            return None
        account_id, expires_at = entry
        if expires_at <= self.clock():
            del self.tokens[token]
            return None
        return account_id

    def signup(self, username: str, email: str, password: str) -> Dict[str, Any]:
        taken = self.store.find(
            lambda a: a.get("username", "").lower() == username.lower() or a.get("email", "").lower() == email.lower()
        )
        if taken:
            logger.warning(f"Signup rejected: username or email already registered ({username})")
            raise DuplicateAccount("Username or email already registered")
        salt = secrets.token_hex(16)
        account = self.store.create({
            "username": username,
            "email": email,
            "password_hash": hash_password(password, salt),
            "salt": salt,
            "created_at": utc_now_iso(),
        })
        logger.info(f"Account {account['id']} ({username}) signed up")
        return self._issue_token(account)

    def login(self, username: str, password: str) -> Dict[str, Any]:
        wanted = username.lower()
        account = self.store.find(lambda a: a.get("username", "").lower() == wanted or a.get("email", "").lower() == wanted)
        if account is None or not hmac.compare_digest(hash_password(password, account["salt"]), account["password_hash"]):
            logger.warning(f"Login failed for {username}")
            raise AuthError("Invalid username or password")
        logger.info(f"Account {account['id']} logged in")
        return self._issue_token(account)

    def logout(self, token: Optional[str]) -> bool:
        if self._account_id(token) is None:
            return False
        del self.tokens[token]
        return True

    def me(self, token: Optional[str]) -> Dict[str, Any]:
        account_id = self._account_id(token)
        if account_id is None:
            raise AuthError("Invalid or missing token")
        account = self.store.find(lambda a: a.get("id") == account_id)
        if account is None:
            # account removed from the mock file after login
            self.tokens.pop(token, None)
            raise AuthError("Invalid or missing token")
        return public_account(account)

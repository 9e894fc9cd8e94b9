"""Garmin Connect authentication helpers.

Token-first login for the push CLI: saved garth tokens are reused when
they still work, otherwise a fresh SSO login runs and the new tokens are
written back to the token directory.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional

from garminconnect import Garmin

from garmin_client.exceptions import GarminAuthError, GarminMFARequired

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
_TOKEN_FILE = "oauth1_token.json"


def has_saved_tokens(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> bool:
    return (Path(token_dir) / _TOKEN_FILE).exists()


def create_session(
    email: str,
    password: str,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    prompt_mfa: Optional[Callable[[], str]] = None,
) -> Garmin:
    """Authenticate with Garmin Connect and return a session.

    Parameters
    ----------
    email, password : str
        Garmin Connect credentials. Only used when token resume fails.
    token_dir : Path | str
        Directory where garth tokens are persisted.
    prompt_mfa : callable, optional
        Returns the MFA code when Garmin asks for one. Without it an MFA
        challenge raises ``GarminMFARequired``.

    Raises
    ------
    GarminMFARequired
        MFA was requested and no *prompt_mfa* was given.
    GarminAuthError
        Any other login failure.
    """
    token_dir = Path(token_dir)
    token_dir.mkdir(parents=True, exist_ok=True)
    tokenstore = str(token_dir)

    if has_saved_tokens(token_dir):
        try:
            garmin = Garmin(email=email, password=password)
            garmin.login(tokenstore=tokenstore)
            garmin.garth.dump(tokenstore)
            logger.info("Resumed Garmin session from %s", token_dir)
            return garmin
        except Exception:
            logger.info("Saved tokens rejected, falling back to SSO login")

    if not email or not password:
        raise GarminAuthError("No usable tokens and no Garmin credentials configured")

    try:
        garmin = Garmin(email=email, password=password, prompt_mfa=prompt_mfa)
        garmin.login()
        garmin.garth.dump(tokenstore)
        logger.info("Logged in via SSO, tokens saved to %s", token_dir)
        return garmin
    except Exception as exc:
        message = str(exc).lower()
        if prompt_mfa is None and ("mfa" in message or "verification" in message):
            raise GarminMFARequired(str(exc)) from exc
        raise GarminAuthError(f"Login failed: {exc}") from exc


def resume_session(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> Garmin:
    """Resume a session from saved tokens only.

    Raises ``GarminAuthError`` if tokens are missing or expired.
    """
    token_dir = Path(token_dir)
    if not has_saved_tokens(token_dir):
        raise GarminAuthError(f"No saved tokens at {token_dir}")

    try:
        garmin = Garmin()
        garmin.login(tokenstore=str(token_dir))
        logger.debug("Resumed Garmin session from %s", token_dir)
        return garmin
    except Exception as exc:
        raise GarminAuthError(f"Token resume failed: {exc}") from exc


def clear_tokens(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> None:
    """Delete saved tokens."""
    token_dir = Path(token_dir)
    if token_dir.exists():
        shutil.rmtree(token_dir)
        logger.info("Cleared tokens at %s", token_dir)

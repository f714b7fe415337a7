"""Accounts keyed by client certificate fingerprint."""

import datetime as dt

from sqlmodel import Session, select

from .logging import get_logger
from .models import Account

logger = get_logger(__name__)


def get_or_create_account(session: Session, fingerprint: str) -> Account:
    """Return the account for `fingerprint`, creating it on first visit."""
    account = session.exec(
        select(Account).where(Account.fingerprint == fingerprint)
    ).first()

    if account is None:
        account = Account(fingerprint=fingerprint)
        session.add(account)
        logger.info("account_created", fingerprint=fingerprint)
    else:
        account.last_seen = dt.datetime.now(dt.UTC)
        logger.debug("account_seen", fingerprint=fingerprint)

    session.commit()
    session.refresh(account)
    return account


def display_name(account: Account) -> str:
    """Short, stable player name derived from the fingerprint."""
    return f"Wanderer-{account.fingerprint[-6:]}"

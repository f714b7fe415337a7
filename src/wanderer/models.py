"""Database models for Wanderer."""

import datetime as dt

from sqlmodel import Field, SQLModel


class Account(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    fingerprint: str = Field(unique=True, index=True)
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )
    last_seen: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )


class SavedGame(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    account_id: int = Field(foreign_key="account.id", unique=True, index=True)
    location_name: str
    turns: int = 0
    is_finished: bool = False
    started_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )
    last_played: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )

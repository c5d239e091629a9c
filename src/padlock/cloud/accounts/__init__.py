"""Accounts backed by a billing customer."""

from padlock.cloud.accounts.account import Account, AccountRecord, create_account

__all__ = ["Account", "AccountRecord", "create_account"]

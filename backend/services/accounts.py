# services/accounts.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import crud.accounts as accounts_crud
from errors import DuplicateUsername, InvalidInput, Unauthorized
from models import Account, fits_integer_column

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    def __init__(self, db: Session):
        self.db = db

    def register(self, username, password) -> Account:
        if not isinstance(username, str) or not username.strip():
            raise InvalidInput("Username must not be blank")
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        # Fast path only; the unique index on accounts.username is authoritative
        if accounts_crud.get_account_by_username(self.db, username):
            raise DuplicateUsername(username)

        try:
            account = accounts_crud.create_account(self.db, username, password)
        except IntegrityError:
            logger.info("Lost registration race for username %r", username)
            raise DuplicateUsername(username)

        logger.info("Registered account %s (%s)", account.account_id, username)
        return account

    def login(self, username, password) -> Account:
        account = None
        if isinstance(username, str):
            account = accounts_crud.get_account_by_username(self.db, username)
        if account is None or account.password != password:
            logger.info("Rejected login for username %r", username)
            raise Unauthorized()
        return account

    def get_by_id(self, account_id) -> Optional[Account]:
        if not fits_integer_column(account_id):
            return None
        return accounts_crud.get_account(self.db, account_id)

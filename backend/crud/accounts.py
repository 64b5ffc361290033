# crud/accounts.py
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from models import Account

def get_account(db: Session, account_id: int) -> Optional[Account]:
    return db.get(Account, account_id)

def get_account_by_username(db: Session, username: str) -> Optional[Account]:
    return db.query(Account).filter(Account.username == username).first()

def create_account(db: Session, username: str, password: str) -> Account:
    account = Account(username=username, password=password)
    db.add(account)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(account)
    return account

# services/messages.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

import crud.messages as messages_crud
from errors import InvalidInput
from models import MAX_MESSAGE_LENGTH, Message, fits_integer_column
from services.accounts import AccountService

logger = logging.getLogger(__name__)


def validate_text(text) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Message text must not be blank")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise InvalidInput(f"Message text must be at most {MAX_MESSAGE_LENGTH} characters")
    return text


class MessageService:
    def __init__(self, db: Session, accounts: AccountService):
        self.db = db
        self.accounts = accounts

    def create(self, message_text, posted_by, time_posted_epoch: Optional[int] = None) -> Message:
        validate_text(message_text)
        if self.accounts.get_by_id(posted_by) is None:
            raise InvalidInput(f"Account {posted_by!r} does not exist")
        if not fits_integer_column(time_posted_epoch):
            time_posted_epoch = None

        message = messages_crud.create_message(self.db, posted_by, message_text, time_posted_epoch)
        logger.debug("Account %s posted message %s", posted_by, message.message_id)
        return message

    def get_all(self) -> List[Message]:
        return messages_crud.list_messages(self.db)

    def get_by_id(self, message_id: int) -> Optional[Message]:
        if not fits_integer_column(message_id):
            return None
        return messages_crud.get_message(self.db, message_id)

    def get_by_account(self, account_id: int) -> List[Message]:
        if not fits_integer_column(account_id):
            return []
        return messages_crud.list_messages_by_account(self.db, account_id)

    def delete(self, message_id: int) -> int:
        # Absence is a no-op here, unlike update_text
        if not fits_integer_column(message_id):
            return 0
        count = messages_crud.delete_message(self.db, message_id)
        if count:
            logger.info("Deleted message %s", message_id)
        return count

    def update_text(self, message_id: int, new_text) -> int:
        if not fits_integer_column(message_id) or messages_crud.get_message(self.db, message_id) is None:
            raise InvalidInput(f"Message {message_id} does not exist")
        validate_text(new_text)

        count = messages_crud.update_message_text(self.db, message_id, new_text)
        if count == 0:
            # deleted between the lookup and the UPDATE
            raise InvalidInput(f"Message {message_id} does not exist")
        logger.info("Updated text of message %s", message_id)
        return count

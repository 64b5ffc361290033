# models.py
import time

from sqlalchemy import BigInteger, Column, Integer, String
from database import Base

MAX_MESSAGE_LENGTH = 255

# Signed 64-bit range of an INTEGER/BIGINT column
MIN_INTEGER = -2**63
MAX_INTEGER = 2**63 - 1


def _now_epoch():
    return int(time.time())


def fits_integer_column(value):
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return MIN_INTEGER <= value <= MAX_INTEGER


class Account(Base):
    __tablename__ = "accounts"

    account_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # The unique index is what actually stops two concurrent registrations
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)

    def to_dict(self):
        return {"accountId": self.account_id, "username": self.username}


class Message(Base):
    __tablename__ = "messages"

    message_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Plain integer reference, no FK cascade
    posted_by = Column(Integer, index=True, nullable=False)
    message_text = Column(String(MAX_MESSAGE_LENGTH), nullable=False)
    time_posted_epoch = Column(BigInteger, nullable=False, default=_now_epoch)

    def to_dict(self):
        return {
            "messageId": self.message_id,
            "postedBy": self.posted_by,
            "messageText": self.message_text,
            "timePostedEpoch": self.time_posted_epoch,
        }

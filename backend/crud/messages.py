# crud/messages.py
from typing import List, Optional

from sqlalchemy.orm import Session
from models import Message

def create_message(db: Session, posted_by: int, text: str, time_posted_epoch: Optional[int] = None) -> Message:
    message = Message(posted_by=posted_by, message_text=text)
    if time_posted_epoch is not None:
        message.time_posted_epoch = time_posted_epoch
    db.add(message)
    db.commit()
    db.refresh(message)
    return message

def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.get(Message, message_id)

def list_messages(db: Session) -> List[Message]:
    return db.query(Message).order_by(Message.message_id).all()

def list_messages_by_account(db: Session, account_id: int) -> List[Message]:
    return (
        db.query(Message)
        .filter(Message.posted_by == account_id)
        .order_by(Message.message_id)
        .all()
    )

def delete_message(db: Session, message_id: int) -> int:
    """Single DELETE ... WHERE; returns the number of rows removed (0 or 1)."""
    count = db.query(Message).filter(Message.message_id == message_id).delete(synchronize_session=False)
    db.commit()
    return count

def update_message_text(db: Session, message_id: int, text: str) -> int:
    """Single conditional UPDATE; 0 means the row was gone by the time it ran."""
    count = (
        db.query(Message)
        .filter(Message.message_id == message_id)
        .update({Message.message_text: text}, synchronize_session=False)
    )
    db.commit()
    return count

# claimcheck/core/users.py
# Credential store: create users, look them up, check and change passwords

import logging
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from claimcheck.core.security import PasswordHasher
from claimcheck.errors import ConflictError
from claimcheck.models import User
from claimcheck.schemas import normalize_email


logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "User with this email or username already exists"


def create_user(db: Session, passwords: PasswordHasher, username: str, email: str, password: str) -> User:
    """
    Stores a new user with a bcrypt hash of the password.
    Raises ConflictError if the username or email is taken, including when a
    concurrent insert wins the race and the unique index rejects this one.
    """
    email = normalize_email(email) or email
    existing = db.query(User).filter(or_(User.username == username, User.email == email)).first()
    if existing:
        raise ConflictError(CONFLICT_MESSAGE)

    user = User(username=username, email=email, hashed_password=passwords.hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(CONFLICT_MESSAGE) from e
    db.refresh(user)
    logger.info("Created user id=%s username=%s", user.id, user.username)
    return user


def find_by_username_or_email(db: Session, identifier: str) -> User | None:
    emails = {identifier, normalize_email(identifier) or identifier}
    return (
        db.query(User)
        .filter(or_(User.username == identifier, User.email.in_(emails)))
        .order_by(User.id.asc())
        .first()
    )


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def find_by_username_and_email(db: Session, username: str, email: str) -> User | None:
    return db.query(User).filter(User.username == username, User.email == email).first()


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def authenticate_user(db: Session, passwords: PasswordHasher, identifier: str, password: str) -> User | None:
    user = find_by_username_or_email(db, identifier)
    if not user or not passwords.verify(password, user.hashed_password):
        return None
    return user


def update_password(db: Session, passwords: PasswordHasher, user: User, new_password: str) -> User:
    user.hashed_password = passwords.hash(new_password)
    db.commit()
    db.refresh(user)
    logger.info("Password updated for user id=%s", user.id)
    return user

# File: socialweb/models/user.py

"""
User model.

A registered account on the social web. The id is generated by the
database on insert; every other column is copied from the sign-up
request as-is.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from socialweb.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Stored exactly as submitted. No hashing policy has been decided yet.
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} user_name={self.user_name!r}>"

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    __tablename__ = "users"
    # ids are never handed out twice, even on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    # plaintext; the login endpoint is a demo placeholder
    password: str
    display_name: str
    email: str = Field(index=True, unique=True)
    weight: Optional[float] = None  # lbs
    height: Optional[float] = None  # inches
    avatar_url: Optional[str] = None

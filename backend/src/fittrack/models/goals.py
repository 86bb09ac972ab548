from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class Goal(SQLModel, table=True):
    __tablename__ = "goals"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    name: str
    description: str
    target_date: datetime = Field(sa_column=Column(DateTime(timezone=False), nullable=False))
    current_value: float
    target_value: float
    unit: str  # lbs, miles, K, ...
    status: str = Field(index=True)

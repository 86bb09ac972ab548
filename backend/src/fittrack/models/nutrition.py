from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class NutritionEntry(SQLModel, table=True):
    __tablename__ = "nutrition_entries"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    date: datetime = Field(sa_column=Column(DateTime(timezone=False), nullable=False, index=True))
    calories: int
    protein: Optional[float] = None  # grams
    carbs: Optional[float] = None
    fat: Optional[float] = None
    notes: Optional[str] = None

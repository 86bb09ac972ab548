from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class Workout(SQLModel, table=True):
    __tablename__ = "workouts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True)
    name: str
    type: str = Field(index=True)
    duration: int  # minutes
    calories_burned: Optional[int] = None
    # naive UTC (fittrack.utils.dates); the column type is spelled out so SQLModel does not pick a tz-aware one
    date: datetime = Field(sa_column=Column(DateTime(timezone=False), nullable=False, index=True))
    notes: Optional[str] = None
    status: str = Field(index=True)


class Exercise(SQLModel, table=True):
    __tablename__ = "exercises"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    # no FK constraint: exercises outlive their workout on delete
    workout_id: int = Field(index=True)
    name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[float] = None  # lbs
    duration: Optional[int] = None  # minutes, cardio
    distance: Optional[float] = None  # miles, cardio

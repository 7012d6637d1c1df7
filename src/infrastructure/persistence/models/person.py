"""ORM model for the person table."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Identity, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base

TABLE_NAME = "person"


class Person(Base):
    """One stored person.

    id is generated by the database (GENERATED ALWAYS AS IDENTITY) and never
    written by the application.  (name, city, house) is the natural key and
    is kept unique by the person_uq constraint.
    """

    __tablename__ = TABLE_NAME
    __table_args__ = (UniqueConstraint("name", "city", "house", name=f"{TABLE_NAME}_uq"),)

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    house: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


person_table = Person.__table__

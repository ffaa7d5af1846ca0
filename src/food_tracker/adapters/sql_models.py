"""SQLAlchemy tables for the relational backend."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Uuid,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    sessionmaker,
)
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    suggested_calories: Mapped[float] = mapped_column(Float, nullable=False)
    suggested_carbs: Mapped[float] = mapped_column(Float, nullable=False)
    suggested_fat: Mapped[float] = mapped_column(Float, nullable=False)
    suggested_protein: Mapped[float] = mapped_column(Float, nullable=False)


class FoodNutritionRow(Base):
    __tablename__ = "food_nutrition"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    measurement: Mapped[str] = mapped_column(String(64), nullable=False)
    carbs: Mapped[float] = mapped_column(Float, nullable=False)
    fat: Mapped[float] = mapped_column(Float, nullable=False)
    protein: Mapped[float] = mapped_column(Float, nullable=False)
    calories: Mapped[float] = mapped_column(Float, nullable=False)


class FoodLogRow(Base):
    __tablename__ = "food_logs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # Minutes east of UTC that date_time was written with; NULL when naive.
    date_time_offset: Mapped[int | None] = mapped_column(Integer, nullable=True)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    update_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    total_calories: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_carbs: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_protein: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_fat: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    items: Mapped[list["FoodItemRow"]] = relationship(
        "FoodItemRow",
        back_populates="food_log",
        cascade="all, delete-orphan",
        order_by="FoodItemRow.position",
    )


class FoodItemRow(Base):
    __tablename__ = "food_items"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    food_log_id: Mapped[UUID] = mapped_column(
        ForeignKey("food_logs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    food_nutrition_id: Mapped[UUID] = mapped_column(
        ForeignKey("food_nutrition.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    unit: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    food_log: Mapped[FoodLogRow] = relationship("FoodLogRow", back_populates="items")
    food_nutrition: Mapped[FoodNutritionRow] = relationship(
        "FoodNutritionRow", lazy="joined"
    )


def create_database(database_url: str, echo: bool = False) -> Engine:
    """Create an engine and make sure every table exists."""
    if database_url in {"sqlite://", "sqlite:///:memory:"}:
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo)
    Base.metadata.create_all(engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.orm import relationship

from daily_diet.core.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(String, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Без каскадного удаления: пользователи этим сервисом не удаляются
    meals = relationship("Meal", back_populates="user")

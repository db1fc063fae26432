import uuid

from sqlalchemy import Column, String, Text, Boolean, BigInteger, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from daily_diet.core.base import Base


class Meal(Base):
    __tablename__ = "meals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), index=True)
    name = Column(String)
    description = Column(Text)
    diet = Column(Boolean)
    # epoch-миллисекунды
    date = Column(BigInteger)

    user = relationship("User", back_populates="meals")

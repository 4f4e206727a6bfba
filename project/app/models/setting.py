# app/models/setting.py

from sqlalchemy import Column, Integer, String, Text
from app.utils.database import Base

class Setting(Base):
    __tablename__ = "settings"

    id    = Column(Integer, primary_key=True, index=True)   # автоинкремент
    key   = Column(String, unique=True, nullable=False)     # shopLogo / shopName
    value = Column(Text, nullable=True)

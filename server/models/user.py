# server/models/user.py

from sqlalchemy import Column, Integer, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for admin users.
    `password` holds the combined scrypt credential ("<key hex>.<salt hex>").
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)

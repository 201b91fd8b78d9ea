from sqlalchemy import Column, DateTime, Integer, String, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Link(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Short Code: 6-8 alphanumeric chars, uniqueness enforced by the table
    code = Column(String(8), unique=True, index=True, nullable=False)
    url = Column(Text, nullable=False)

    # Usage counters, written only by the redirect path
    clicks = Column(Integer, nullable=False, default=0, server_default="0")
    last_clicked = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import declarative_base

from config.settings import settings

# ✅ sql 백엔드 전용 Base (Supabase 테이블과 같은 컬럼명 사용)
Base = declarative_base()


class Student(Base):
    __tablename__ = settings.STUDENT_TABLE  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)  # 고유 학생 ID (Primary Key)
    name = Column("Name", String(200), nullable=False)                     # 학생 이름
    address = Column("Address", String(200), default="")                   # 주소
    phone = Column("Phone", String(50), default="")                        # 연락처
    note = Column("Observacion", Text, default="")                         # 비고

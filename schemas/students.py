from pydantic import BaseModel, ConfigDict, Field, field_validator

# 폼에서 편집 가능한 필드 (id 제외)
DRAFT_FIELDS = ("name", "address", "phone", "note")


# ✅ 입력용 (폼 draft, insert/update payload)
class StudentDraft(BaseModel):
    # 호스팅 테이블의 컬럼명(Name/Address/Phone/Observacion) ↔ 내부 필드명
    name: str = Field("", alias="Name")              # 학생 이름 (폼에서 필수)
    address: str = Field("", alias="Address")        # 주소
    phone: str = Field("", alias="Phone")            # 연락처
    note: str = Field("", alias="Observacion")       # 비고 (여러 줄)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("name", "address", "phone", "note", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    def to_row(self) -> dict:
        """DataStore로 보낼 행(컬럼명 기준)"""
        return self.model_dump(by_alias=True)


# ✅ 출력용 (DataStore가 돌려준 행)
class StudentRecord(StudentDraft):
    id: int

    def to_draft(self) -> StudentDraft:
        return StudentDraft(**self.model_dump(include=set(DRAFT_FIELDS)))

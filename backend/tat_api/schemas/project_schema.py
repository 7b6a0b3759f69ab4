# 프로젝트 요청 스키마
# - 날짜는 문자열로 받아 서비스에서 파싱 (형식 오류를 400으로 내려주기 위함)

from typing import Optional
from pydantic import BaseModel

class ProjectCreate(BaseModel):
    project_name: Optional[str] = None
    description: Optional[str] = None
    leader_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    budget: Optional[float] = None
    status: Optional[str] = None

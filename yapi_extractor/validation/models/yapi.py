"""Models for data exchanged with the YApi platform."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# errcode YApi returns when the session cookie is missing or expired
SESSION_EXPIRED_ERRCODE = 40011


class ResponseEnvelope(BaseModel):
    """Uniform ``{errcode, errmsg, data}`` wrapper of every YApi response."""

    model_config = ConfigDict(extra="ignore")

    errcode: int
    errmsg: str = ""
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.errcode == 0

    @property
    def session_expired(self) -> bool:
        return self.errcode == SESSION_EXPIRED_ERRCODE


class InterfaceRecord(BaseModel):
    """Snapshot of one documented interface, as returned by /api/interface/get."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(alias="_id")
    project_id: int
    title: str
    method: str
    path: str
    res_body: str = ""
    res_body_type: Optional[str] = None


class MockScenario(BaseModel):
    """An advanced mock case as transmitted to /api/plugin/advmock/case/save."""

    name: str
    interface_id: str
    project_id: str
    res_body: str
    code: str = "200"
    delay: int = 0
    headers: List[Any] = Field(default_factory=list)
    params: dict = Field(default_factory=dict)
    ip_enable: bool = False

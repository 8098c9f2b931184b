from pydantic import BaseModel


class ProjectCodeCreate(BaseModel):
    code: str = ""


class TaskTypeCreate(BaseModel):
    type: str = ""


class LinkCreate(BaseModel):
    url: str = ""

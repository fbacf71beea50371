"""Pydantic base schemas shared by every router"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AckResponse(CamelModel):
    """Confirmation returned by mutating endpoints"""
    message: str

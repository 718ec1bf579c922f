# Public six degrees entities. Built fresh per request by the result mapper.
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class Thing(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    api_url: Optional[str] = Field(default=None, alias="apiUrl")
    pref_label: Optional[str] = Field(default=None, alias="prefLabel")

    @model_serializer(mode="wrap")
    def _omit_missing_label(self, handler):
        data = handler(self)
        # prefLabel is optional on the wire; every other field is always sent
        if self.pref_label is None:
            data.pop("prefLabel", None)
            data.pop("pref_label", None)
        return data


class Content(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    api_url: str = Field(alias="apiUrl")
    title: Optional[str] = None


class ConnectedPerson(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    person: Thing
    count: int
    content: List[Content] = []


class ErrorMessage(BaseModel):
    message: str

# alexamodel/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AlexaModel(BaseModel):
    """
    Base for all Smart Home API v3 structures.

    Python attributes are snake_case, the JSON keys Alexa sends and expects
    are camelCase. Unknown keys in incoming JSON are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self):
        # Absent optional fields are left out completely, Alexa rejects "null"
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

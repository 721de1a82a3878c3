from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import MissingFieldError


class OrderBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer: str
    beverage: str
    price: float
    sugar: bool
    extra_foam: bool = Field(alias="extraFoam")

    @model_validator(mode="wrap")
    @classmethod
    def report_missing_fields(cls, data, handler):
        try:
            return handler(data)
        except ValidationError as e:
            missing, invalid = [], []
            for err in e.errors():
                key = str(err["loc"][0]) if err["loc"] else "__root__"
                (missing if err["type"] == "missing" else invalid).append(key)
            if not missing:
                raise
            raise MissingFieldError(missing, invalid) from e


class OrderCreate(OrderBase):
    pass

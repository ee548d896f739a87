from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class DTO(BaseModel):
    """
    Base for all DTOs.

    DTOs are validated straight from ORM rows (from_attributes) and double as
    API schemas, so fields are exposed in camelCase (productId, createdAt)
    while Python code keeps using snake_case names.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

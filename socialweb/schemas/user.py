# File: socialweb/schemas/user.py

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserBase(BaseModel):
    # Wire format is camelCase (userName, displayName); snake_case is accepted too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_name: Optional[str] = None
    display_name: Optional[str] = None


class UserCreate(UserBase):
    password: Optional[str] = None


class UserRead(UserBase):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int

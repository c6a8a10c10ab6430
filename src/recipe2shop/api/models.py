"""Request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field, model_validator


class DateRangeRequest(BaseModel):
    """Inclusive date range for a shopping list."""

    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _check_order(self) -> "DateRangeRequest":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class ManualItemRequest(BaseModel):
    """Item added by hand to a shopping list."""

    name: str = Field(min_length=1)
    quantity: float = Field(default=1.0, ge=0)
    unit: str | None = None
    category: str | None = None


class CheckRequest(BaseModel):
    checked: bool


class OnHandRequest(BaseModel):
    """Quantity of an item already at home."""

    quantity: float = Field(ge=0)


class AssignmentRequest(BaseModel):
    """Dish to schedule on a meal slot."""

    date: date
    meal_type: str
    dish_id: str = Field(min_length=1)
    portions: int = Field(default=1, ge=1)
    replace: bool = False


class RemoveAssignmentRequest(BaseModel):
    date: date
    meal_type: str
    dish_id: str


class CategoryRequest(BaseModel):
    category: str = Field(min_length=1)

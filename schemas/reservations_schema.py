from sqlmodel import SQLModel, Field
from typing import List
from datetime import date, datetime, time


class ReservationBase(SQLModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    mobile_number: str = Field(min_length=1, max_length=20)
    reservation_date: date
    reservation_time: time
    people: int = Field(ge=1)


class ReservationCreate(ReservationBase):
    pass


class ReservationRead(ReservationBase):
    reservation_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ReservationRequest(SQLModel):
    data: ReservationCreate


class ReservationResponse(SQLModel):
    data: ReservationRead


class ReservationListResponse(SQLModel):
    data: List[ReservationRead]

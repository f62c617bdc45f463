"""MGNREGA resource schemas - district-wise data at a glance."""

import math

from pydantic import BaseModel, Field, field_validator

INT_FIELDS = (
    "households_worked",
    "persondays",
    "women_persondays",
    "sc_persondays",
    "st_persondays",
    "completed_works",
    "ongoing_works",
    "individuals_worked",
    "job_cards",
    "households_100_days",
    "differently_abled_worked",
)

FLOAT_FIELDS = (
    "total_exp",
    "avg_days",
    "wage_rate",
    "payment_within_15_days",
)


def parse_float(value) -> float:
    """Lenient float parsing: blanks, 'NA' and garbage become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).replace(",", "").strip())
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_int(value) -> int:
    """Lenient int parsing: truncates decimals, anything unparseable becomes 0."""
    return int(parse_float(value))


class DistrictRecordSchema(BaseModel):
    """One district row for a (state, financial year, month) query."""

    district_name: str = ""
    state_name: str | None = None
    fin_year: str | None = None
    month: str | None = None
    total_exp: float = Field(alias="Total_Exp", default=0.0)
    households_worked: int = Field(alias="Total_Households_Worked", default=0)
    persondays: int = Field(alias="Persondays_of_Central_Liability_so_far", default=0)
    avg_days: float = Field(alias="Average_days_of_employment_provided_per_Household", default=0.0)
    wage_rate: float = Field(alias="Average_Wage_rate_per_day_per_person", default=0.0)
    women_persondays: int = Field(alias="Women_Persondays", default=0)
    sc_persondays: int = Field(alias="SC_persondays", default=0)
    st_persondays: int = Field(alias="ST_persondays", default=0)
    completed_works: int = Field(alias="Number_of_Completed_Works", default=0)
    ongoing_works: int = Field(alias="Number_of_Ongoing_Works", default=0)
    individuals_worked: int = Field(alias="Total_Individuals_Worked", default=0)
    job_cards: int = Field(alias="Total_No_of_JobCards_issued", default=0)
    households_100_days: int = Field(
        alias="Total_No_of_HHs_completed_100_Days_of_Wage_Employment", default=0
    )
    differently_abled_worked: int = Field(alias="Differently_abled_persons_worked", default=0)
    # Upstream column name is misspelled
    payment_within_15_days: float = Field(alias="percentage_payments_gererated_within_15_days", default=0.0)

    class Config:
        populate_by_name = True

    @field_validator("district_name", mode="before")
    @classmethod
    def _name(cls, v):
        return "" if v is None else str(v)

    @field_validator(*INT_FIELDS, mode="before")
    @classmethod
    def _lenient_int(cls, v):
        return parse_int(v)

    @field_validator(*FLOAT_FIELDS, mode="before")
    @classmethod
    def _lenient_float(cls, v):
        return parse_float(v)


class ResourceResponseSchema(BaseModel):
    """Envelope returned by /resource/{id}."""

    records: list[DistrictRecordSchema]
    total: int | None = None
    count: int | None = None

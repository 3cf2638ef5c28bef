"""Date manipulation utilities"""

from datetime import date
from dateutil.relativedelta import relativedelta


def age_between(birth_date: date, on_date: date) -> relativedelta:
    """Calendar age (years, months, days) of someone born on birth_date, as of on_date"""
    return relativedelta(on_date, birth_date)


def add_months(age: relativedelta, months: int) -> relativedelta:
    """
    Add months to a calendar age, carrying overflow into years.

    Example: 17 years 11 months + 3 months -> 18 years 2 months
    """
    return age + relativedelta(months=months)

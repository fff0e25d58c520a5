import calendar
from datetime import date, datetime
from typing import Callable

from pydantic import BaseModel, ConfigDict

DUE_DAYS = 15
LINE_NAME_TEMPLATE = "Services according to agreement in month {month}"

Clock = Callable[[], datetime]


class BillingPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    now: datetime

    @classmethod
    def current(cls, clock: Clock = datetime.now) -> "BillingPeriod":
        return cls(now=clock())

    @property
    def issued_on(self) -> date:
        """Last calendar day of the billed month."""
        last_day = calendar.monthrange(self.now.year, self.now.month)[1]
        return date(self.now.year, self.now.month, last_day)

    @property
    def due(self) -> int:
        return DUE_DAYS

    @property
    def line_name(self) -> str:
        month = f"{calendar.month_name[self.now.month]} {self.now.year}"
        return LINE_NAME_TEMPLATE.format(month=month)

    @property
    def month_key(self) -> str:
        return self.now.strftime("%Y-%m")

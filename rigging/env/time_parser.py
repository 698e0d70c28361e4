import re
from datetime import timedelta


class TimeParser:
    def __init__(self) -> None:
        self._units = {
            "ms": "milliseconds",
            "s": "seconds",
            "m": "minutes",
            "h": "hours",
            "d": "days",
            "w": "weeks",
        }

    def parse(self, time_amount: str | int | float) -> float:
        if isinstance(time_amount, (int, float)):
            return float(time_amount)

        matches = list(
            re.finditer(
                r"(?P<val>\d+(\.\d+)?)(?P<unit>ms|[smhdw]?)",
                time_amount.strip(),
                flags=re.I,
            )
        )

        if not matches:
            raise ValueError(f"Err. - could not parse duration '{time_amount}'")

        total = timedelta()
        for match in matches:
            unit = self._units.get(match.group("unit").lower(), "seconds")
            total += timedelta(**{unit: float(match.group("val"))})

        return total.total_seconds()

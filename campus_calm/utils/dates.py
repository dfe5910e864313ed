from datetime import datetime

def iso_z(dt: datetime) -> str:
    return dt.replace(microsecond=0).isoformat() + "Z"

def weekday_short(dt: datetime) -> str:
    # Mon, Tue, ...
    return dt.strftime("%a")

def us_date(dt: datetime) -> str:
    # M/D/YYYY without zero padding
    return f"{dt.month}/{dt.day}/{dt.year}"

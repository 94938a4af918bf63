from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Возвращает текущие дату и время в UTC."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Возвращает текущую дату в UTC."""
    return utc_now().date()

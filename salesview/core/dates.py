from datetime import date, datetime

# Transactions keep their dates as DD-MM-YYYY text. Range filters compare this
# text directly, which is not chronological across months or years.
DATE_FORMAT = "%d-%m-%Y"


def parse_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value_text = str(value).strip()
    if not value_text:
        return None
    try:
        return datetime.strptime(value_text, DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(value_text)
    except ValueError:
        return None


def format_date(value):
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(DATE_FORMAT)


def normalize_date_text(value):
    """Render an imported date cell as stored text.

    Spreadsheet cells arrive as ``date``/``datetime`` and are formatted as
    ``DD-MM-YYYY``; text is stored as given.
    """
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return format_date(value)
    value_text = str(value).strip()
    return value_text or None

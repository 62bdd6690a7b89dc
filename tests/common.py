import datetime as dt

from dateutil.tz import tzutc

from vcardwriter import Name, VCard, format_vcard

TEST_FILE_DIR = "tests/test_files"

CRLF = "\r\n"

moment = dt.datetime(1995, 10, 31, 22, 27, 10, tzinfo=tzutc())


def get_test_file(file_name: str) -> str:
    """Helper function to open and read test files."""
    filepath = f"{TEST_FILE_DIR}/{file_name}"
    with open(filepath, "r", encoding="utf-8") as f:
        text = f.read()
    return text


def john_doe(**kwargs) -> VCard:
    """A minimal card, extra fields passed as keywords."""
    return VCard(formatted_name="John Doe", name=Name(family="Doe", given="John"), **kwargs)


def card_lines(card, options=None) -> list:
    return format_vcard(card, options).split(CRLF)

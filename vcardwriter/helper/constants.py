class Character:
    """Space and Line-break characters"""

    CR = "\r"
    LF = "\n"
    CRLF = CR + LF
    SPACE = " "
    FOLD = CRLF + SPACE


LINE_LENGTH = 75
DEFAULT_CHARSET = "UTF-8"
